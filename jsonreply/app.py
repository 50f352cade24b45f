"""Demo Starlette application serving envelopes over HTTP."""
from __future__ import annotations

import json
import logging

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from jsonreply.api.helpers import bad_request, ok
from jsonreply.api.responder import respond
from jsonreply.statuses import STATUSES
from jsonreply.web import BufferedSink, http_exception_handler

logger = logging.getLogger("jsonreply.app")


async def health(request: Request) -> Response:
    sink = BufferedSink()
    ok(sink, {"status": "ok"})
    return sink.to_response()


async def list_statuses(request: Request) -> Response:
    rows = [
        {
            "code": entry.code,
            "name": entry.name,
            "phrase": entry.phrase,
            "aliases": list(entry.aliases),
        }
        for entry in STATUSES
    ]
    sink = BufferedSink()
    ok(sink, rows)
    return sink.to_response()


async def status_get(request: Request) -> Response:
    code = request.path_params["code"]
    sink = BufferedSink()
    respond(sink, code)
    return sink.to_response()


async def status_post(request: Request) -> Response:
    """Echo the JSON request body back as ``data`` under the requested code."""

    code = request.path_params["code"]
    raw = await request.body()
    sink = BufferedSink()
    if not raw.strip():
        respond(sink, code)
        return sink.to_response()
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Rejected body for status=%s: %s", code, exc)
        bad_request(sink, "request body is not valid JSON")
        return sink.to_response()
    respond(sink, code, payload)
    return sink.to_response()


def build_app(*, debug: bool = False) -> Starlette:
    routes = [
        Route("/health", health, methods=["GET"]),
        Route("/statuses", list_statuses, methods=["GET"]),
        Route("/status/{code:int}", status_get, methods=["GET"]),
        Route("/status/{code:int}", status_post, methods=["POST"]),
    ]
    return Starlette(
        debug=debug,
        routes=routes,
        exception_handlers={HTTPException: http_exception_handler},
    )


__all__ = ["build_app"]
