"""Generic JSON responder writing envelopes to a response sink."""
from __future__ import annotations

import logging
from typing import Protocol

from ..errors import SerializationFault
from ..utils.config import CONTENT_TYPE
from .envelopes import build_envelope, encode_envelope

_LOGGER = logging.getLogger("jsonreply.api.responder")


class ResponseSink(Protocol):
    """Write side of an HTTP response, supplied by the server framework."""

    def set_header(self, name: str, value: str) -> None: ...

    def set_status(self, status_code: int) -> None: ...

    def write(self, data: bytes) -> None: ...


def respond(sink: ResponseSink, status_code: int, *data: object) -> None:
    """Write a ``{"code", "data"}`` envelope with ``status_code`` to ``sink``.

    The payload is optional. Without it ``data`` carries the reason phrase of
    ``status_code``; with it the first value is used as-is and any further
    values are ignored. Status codes are passed through unvalidated.

    The body is encoded before the sink is touched, so a payload that cannot
    be represented as JSON raises ``SerializationFault`` with nothing written.
    """

    envelope = build_envelope(status_code, *data)
    try:
        body = encode_envelope(envelope)
    except SerializationFault as exc:
        _LOGGER.error(
            "envelope.encode_failed status=%s payload_type=%s error=%s",
            status_code,
            type(envelope.data).__name__,
            exc.cause,
        )
        raise

    sink.set_header("Content-Type", CONTENT_TYPE)
    sink.set_status(status_code)
    sink.write(body)
    _LOGGER.debug("envelope.written status=%s bytes=%s", status_code, len(body))


__all__ = ["ResponseSink", "respond"]
