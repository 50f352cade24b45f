"""Minimal CLI helpers for running the demo server."""
from __future__ import annotations

import argparse
import logging
import socket
from typing import Callable

import uvicorn
from starlette.applications import Starlette

from jsonreply.utils.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENSURE_ASCII,
    ESCAPE_HTML,
    TRAILING_NEWLINE,
)

AppFactory = Callable[..., Starlette]
Serve = Callable[[Starlette, str, int], None]


def build_parser() -> argparse.ArgumentParser:
    """Create an argument parser for the demo server."""

    parser = argparse.ArgumentParser(description="jsonreply demo server")
    parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        help=f"Host to bind (default: {DEFAULT_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to bind (default: {DEFAULT_PORT})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def serve_uvicorn(app: Starlette, host: str, port: int) -> None:
    uvicorn.run(app, host=host, port=int(port))


def run(
    args: argparse.Namespace,
    *,
    logger: logging.Logger,
    app_factory: AppFactory,
    serve: Serve = serve_uvicorn,
    check_port: bool = True,
) -> None:
    """Validate the arguments, build the app and hand it to ``serve``."""

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)

    logger.info(
        "Starting jsonreply demo server (http=%s:%s, ensure_ascii=%s, escape_html=%s, trailing_newline=%s)",
        args.host,
        args.port,
        ENSURE_ASCII,
        ESCAPE_HTML,
        TRAILING_NEWLINE,
    )

    if args.port <= 0 or args.port > 65535:
        logger.error("Invalid --port: %s (must be between 1 and 65535)", args.port)
        raise SystemExit(2)

    if check_port:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            try:
                sock.bind((args.host, args.port))
            except OSError as exc:  # pragma: no cover - depends on local env
                logger.error(
                    "Port %s is unavailable on %s: %s. Use --port to pick a free port.",
                    args.port,
                    args.host,
                    exc.strerror or exc,
                )
                raise SystemExit(1)

    app = app_factory(debug=args.debug)
    logger.debug("Serving envelopes on http://%s:%s/status/{code}", args.host, args.port)
    try:
        serve(app, args.host, args.port)
    except OSError as exc:  # pragma: no cover - depends on local env
        logger.error(
            "Failed to start server on %s:%s: %s",
            args.host,
            args.port,
            exc.strerror or exc,
        )
        raise SystemExit(1)


__all__ = ["build_parser", "run", "serve_uvicorn"]
