"""
Tests for the command line interface.

Commands run in-process; output is captured with capsys.
"""

import pytest

from app import cli
from app.domain.error_codes import catalog
from app.domain.error_codes.entities import ErrorDescriptor


class TestCodesCommand:
    """Tests for ``codes``."""

    def test_prints_every_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["codes"])
        lines = [line for line in capsys.readouterr().out.splitlines() if "\t" in line]
        assert "10001\tRecord Not Found" in lines
        assert "12000\tinvalid symbol" in lines
        assert len(lines) == len(catalog.REGISTERED)

    def test_external_view_masks_internal_codes(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        cli.main(["codes", "--external"])
        lines = [line for line in capsys.readouterr().out.splitlines() if "\t" in line]
        assert lines.count("10000\tServer Internal Error") == 1
        assert "12000\tinvalid symbol" in lines
        assert not any(line.startswith("10001\t") for line in lines)
        assert not any(line.startswith("0\t") for line in lines)


class TestCheckCommand:
    """Tests for ``check``."""

    def test_clean_catalog_passes(self) -> None:
        cli.main(["check"])

    def test_duplicate_exits_with_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        duplicate = ErrorDescriptor(12001, "unable to get snapshot E3021")
        monkeypatch.setattr(catalog, "REGISTERED", catalog.REGISTERED + (duplicate,))
        with pytest.raises(SystemExit) as info:
            cli.main(["check"])
        assert info.value.code == 1


class TestArguments:
    """Tests for argument parsing."""

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.main([])
