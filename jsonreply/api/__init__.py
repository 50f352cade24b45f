"""Responder API: envelopes, the generic writer and the named helpers."""

from .envelopes import Envelope, build_envelope, encode_envelope
from .helpers import DEFAULT_RESPONDER, HELPERS, Responder
from .responder import ResponseSink, respond

__all__ = [
    "DEFAULT_RESPONDER",
    "Envelope",
    "HELPERS",
    "Responder",
    "ResponseSink",
    "build_envelope",
    "encode_envelope",
    "respond",
]
