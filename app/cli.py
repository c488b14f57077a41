"""
CLI entry point for the error code registry.

Usage:
    # Print every registered code
    python -m app.cli codes

    # Print the codes as API clients see them
    python -m app.cli codes --external

    # Fail when the catalog registers a code twice
    python -m app.cli check

    # Serve the HTTP API
    python -m app.cli serve --port 8000
"""

import argparse
import logging
import sys

from app.core.config import settings
from app.domain.error_codes.catalog import build_registry
from app.domain.error_codes.entities import ErrorDescriptor
from app.domain.error_codes.errors import DuplicateErrorCodeError
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_codes(args: argparse.Namespace) -> None:
    """Print the catalog, one ``code<TAB>message`` line per entry."""
    registry = build_registry(
        internal_error_limit=settings.internal_error_limit,
        strict=False,
    )
    printed: set[ErrorDescriptor] = set()
    for descriptor in registry.descriptors():
        shown = descriptor
        if args.external:
            shown = registry.lookup_external_safe(descriptor.code)
            if shown is None or shown in printed:
                continue
        printed.add(shown)
        print(f"{shown.code}\t{shown.message}")


def cmd_check(args: argparse.Namespace) -> None:
    """Register the catalog in strict mode and report collisions."""
    try:
        registry = build_registry(
            internal_error_limit=settings.internal_error_limit,
            strict=True,
        )
    except DuplicateErrorCodeError as exc:
        logger.error("%s", exc.message)
        # collect every collision, not just the first
        lenient = build_registry(
            internal_error_limit=settings.internal_error_limit,
            strict=False,
        )
        for code, messages in sorted(lenient.duplicates().items()):
            logger.error("Code %d registered %d times: %s", code, len(messages), messages)
        sys.exit(1)

    logger.info("Catalog OK: %d unique codes.", len(registry))


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Errno error code registry CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    codes_parser = subparsers.add_parser("codes", help="Print the error catalog")
    codes_parser.add_argument(
        "--external", action="store_true",
        help="Show messages as API clients receive them",
    )
    codes_parser.set_defaults(func=cmd_codes)

    check_parser = subparsers.add_parser("check", help="Check codes are unique")
    check_parser.set_defaults(func=cmd_check)

    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    configure_logging(level=settings.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
