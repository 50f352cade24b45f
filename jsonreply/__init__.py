"""Standardized ``{"code", "data"}`` JSON responses for HTTP servers.

``respond(sink, status_code, *data)`` writes an envelope to any response sink;
one named helper per status code (``ok``, ``not_found``, ``teapot``, ...) fixes
the status code.
"""
from __future__ import annotations

from jsonreply.api.envelopes import Envelope, build_envelope, encode_envelope
from jsonreply.api.helpers import DEFAULT_RESPONDER, HELPERS, Responder
from jsonreply.api.responder import ResponseSink, respond
from jsonreply.errors import JsonReplyError, SerializationFault
from jsonreply.statuses import STATUSES, StatusEntry, lookup, reason_phrase

globals().update(HELPERS)

__all__ = [
    "DEFAULT_RESPONDER",
    "Envelope",
    "HELPERS",
    "JsonReplyError",
    "Responder",
    "ResponseSink",
    "STATUSES",
    "SerializationFault",
    "StatusEntry",
    "build_envelope",
    "encode_envelope",
    "lookup",
    "reason_phrase",
    "respond",
    *HELPERS,
]
