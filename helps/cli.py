"""
CLI entry point.

Usage:
    # Start the HTTP listener on the configured address (default :9090)
    python -m helps.cli serve

    # Override the bind address
    python -m helps.cli serve --host 127.0.0.1 --port 8080
"""

import argparse
from typing import Optional, Sequence

from helps.core.config import settings
from helps.shared.logging import configure_logging, get_logger


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the application under uvicorn."""
    import uvicorn

    from helps.main import create_app

    configure_logging(level=settings.log_level)
    logger = get_logger()

    app = create_app(settings=settings, logger=logger)
    logger.info("starting server on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="helps HTTP service")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP listener")
    serve_parser.add_argument(
        "--host", default=settings.host, help="Interface to bind to",
    )
    serve_parser.add_argument(
        "--port", type=int, default=settings.port, help="Port to bind to",
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
