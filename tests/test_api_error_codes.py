"""
Tests for the error codes API and the centralized error handlers.

Each test builds its own application so registries and rate-limit
counters never leak between tests.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.error_codes import catalog
from app.domain.error_codes.entities import (
    ErrnoException,
    ErrorDescriptor,
    HTTPErrnoException,
)
from app.domain.error_codes.errors import DuplicateErrorCodeError
from app.domain.error_codes.registry import ErrorRegistry
from app.main import create_app
from app.shared.security.headers import SECURE_HEADERS


def _boom_app(settings: Settings | None = None) -> FastAPI:
    """An application with extra routes that raise on purpose."""
    app = create_app(settings=settings or Settings())

    @app.get("/boom/internal")
    def raise_internal() -> None:
        raise ErrnoException(catalog.DB_NOT_FOUND, status_code=404)

    @app.get("/boom/public")
    def raise_public() -> None:
        raise ErrnoException(catalog.INVALID_SYMBOL.with_prompt("unknown symbol XYZ"))

    @app.get("/boom/prompted-fallback")
    def raise_prompted_fallback() -> None:
        raise ErrnoException(catalog.UNKNOWN.with_prompt("db password is hunter2"))

    @app.get("/boom/http")
    def raise_http() -> None:
        raise HTTPErrnoException(catalog.HTTP_INVALID_TOKEN)

    @app.get("/boom/success")
    def raise_success() -> None:
        raise ErrnoException(catalog.OK)

    @app.get("/boom/unexpected")
    def raise_unexpected() -> None:
        raise RuntimeError("database password is hunter2")

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(settings=Settings()))


@pytest.fixture
def boom_client() -> TestClient:
    return TestClient(_boom_app(), raise_server_exceptions=False)


class TestDescribeErrorEndpoint:
    """Tests for GET /api/v1/errors/{code}."""

    def test_public_code(self, client: TestClient) -> None:
        response = client.get("/api/v1/errors/12000")
        assert response.status_code == 200
        assert response.json() == {"code": 12000, "message": "invalid symbol"}

    def test_internal_code_is_masked(self, client: TestClient) -> None:
        response = client.get("/api/v1/errors/10001")
        assert response.status_code == 200
        assert response.json() == {"code": 10000, "message": "Server Internal Error"}

    def test_unknown_code_is_fallback(self, client: TestClient) -> None:
        response = client.get("/api/v1/errors/99999")
        assert response.json() == {"code": 10000, "message": "Server Internal Error"}

    def test_success_code_has_no_content(self, client: TestClient) -> None:
        response = client.get("/api/v1/errors/0")
        assert response.status_code == 204
        assert response.content == b""

    def test_non_numeric_code_rejected(self, client: TestClient) -> None:
        """Malformed codes return 422 with the invalid-param descriptor."""
        response = client.get("/api/v1/errors/abc")
        assert response.status_code == 422
        assert response.json() == {"code": 11001, "message": "invalid param"}

    def test_internal_view_forbidden_outside_debug(self, client: TestClient) -> None:
        response = client.get("/api/v1/errors/10001", params={"internal": "true"})
        assert response.status_code == 403
        assert response.json() == {"code": 11003, "message": "no_permission"}

    def test_internal_view_in_debug_mode(self) -> None:
        debug_client = TestClient(create_app(settings=Settings(debug=True)))
        response = debug_client.get("/api/v1/errors/10001", params={"internal": "true"})
        assert response.status_code == 200
        assert response.json() == {"code": 10001, "message": "Record Not Found"}

    def test_registry_can_be_substituted(self) -> None:
        registry = ErrorRegistry(internal_error_limit=100)
        registry.register(200, "custom")
        custom_client = TestClient(create_app(settings=Settings(), registry=registry))
        response = custom_client.get("/api/v1/errors/200")
        assert response.json() == {"code": 200, "message": "custom"}


class TestListErrorsEndpoint:
    """Tests for GET /api/v1/errors."""

    def test_lists_only_public_codes(self, client: TestClient) -> None:
        response = client.get("/api/v1/errors")
        assert response.status_code == 200
        body = response.json()
        assert body["internal_error_limit"] == 10007
        codes = [item["code"] for item in body["errors"]]
        assert codes == sorted(codes)
        assert all(code > 10007 for code in codes)
        assert {"code": 12000, "message": "invalid symbol"} in body["errors"]


class TestErrorHandlers:
    """Tests for the centralized error handlers."""

    def test_internal_errno_is_masked(self, boom_client: TestClient) -> None:
        response = boom_client.get("/boom/internal")
        assert response.status_code == 404
        assert response.json() == {"code": 10000, "message": "Server Internal Error"}

    def test_public_errno_keeps_prompt(self, boom_client: TestClient) -> None:
        response = boom_client.get("/boom/public")
        assert response.status_code == 400
        assert response.json() == {"code": 12000, "message": "unknown symbol XYZ"}

    def test_prompt_on_internal_code_is_dropped(self, boom_client: TestClient) -> None:
        """A prompt attached to the fallback code never reaches the client."""
        response = boom_client.get("/boom/prompted-fallback")
        assert response.status_code == 400
        assert response.json() == {"code": 10000, "message": "Server Internal Error"}
        assert "hunter2" not in response.text

    def test_http_errno_reported_verbatim(self, boom_client: TestClient) -> None:
        response = boom_client.get("/boom/http")
        assert response.status_code == 400
        assert response.json() == {"code": 400, "message": "invalid token"}

    def test_success_raised_as_error(self, boom_client: TestClient) -> None:
        response = boom_client.get("/boom/success")
        assert response.status_code == 400
        assert response.json()["code"] == 10000

    def test_unexpected_error_hides_details(self, boom_client: TestClient) -> None:
        response = boom_client.get("/boom/unexpected")
        assert response.status_code == 500
        assert response.json() == {"code": 10000, "message": "Server Internal Error"}
        assert "hunter2" not in response.text


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_security_headers_on_error_responses(self, boom_client: TestClient) -> None:
        response = boom_client.get("/boom/internal")
        assert response.headers["X-Content-Type-Options"] == "nosniff"


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self) -> None:
        """Exceeding the limit returns 429 with the too-many-requests code."""
        limited = TestClient(create_app(settings=Settings(rate_limit_default="2/minute")))
        statuses = [limited.get("/api/v1/errors/12000").status_code for _ in range(3)]
        assert statuses[:2] == [200, 200]
        assert statuses[2] == 429

        response = limited.get("/api/v1/errors/12000")
        body = response.json()
        assert body["code"] == catalog.ERR_CODE_TOO_MANY_REQUEST
        assert body["message"] == "Rate limit exceeded"


class TestStartupUniquenessCheck:
    """The application factory refuses a catalog with duplicate codes."""

    def test_strict_startup_fails_on_duplicate(self, monkeypatch: pytest.MonkeyPatch) -> None:
        duplicate = ErrorDescriptor(12001, "unable to get snapshot E3021")
        monkeypatch.setattr(catalog, "REGISTERED", catalog.REGISTERED + (duplicate,))
        with pytest.raises(DuplicateErrorCodeError) as info:
            create_app(settings=Settings(strict_unique_codes=True))
        assert info.value.code == 12001

    def test_lenient_startup_keeps_last_registration(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        duplicate = ErrorDescriptor(12001, "unable to get snapshot E3021")
        monkeypatch.setattr(catalog, "REGISTERED", catalog.REGISTERED + (duplicate,))
        app = create_app(settings=Settings(strict_unique_codes=False))
        registry = app.state.error_registry
        assert registry.lookup(12001) == duplicate
        assert 12001 in registry.duplicates()
