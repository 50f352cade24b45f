"""Starlette glue: a buffering sink and envelope-shaped responses."""
from __future__ import annotations

from dataclasses import dataclass, field

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from jsonreply.api.responder import respond


@dataclass
class BufferedSink:
    """Collects status, headers and body so they can become a Starlette response."""

    status_code: int | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: bytearray = field(default_factory=bytearray)

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def set_status(self, status_code: int) -> None:
        self.status_code = status_code

    def write(self, data: bytes) -> None:
        self.body.extend(data)

    def to_response(self) -> Response:
        return Response(
            content=bytes(self.body),
            status_code=self.status_code if self.status_code is not None else 200,
            headers=self.headers,
        )


def json_response(status_code: int, *data: object) -> Response:
    """Build a Starlette response holding the envelope for ``status_code``."""

    sink = BufferedSink()
    respond(sink, status_code, *data)
    return sink.to_response()


async def http_exception_handler(request: Request, exc: HTTPException) -> Response:
    """Render ``HTTPException`` as an envelope, keeping any headers it carries."""

    sink = BufferedSink()
    if exc.headers:
        sink.headers.update(exc.headers)
    respond(sink, exc.status_code, exc.detail)
    return sink.to_response()


__all__ = ["BufferedSink", "http_exception_handler", "json_response"]
