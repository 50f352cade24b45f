"""Envelope model and JSON encoding for HTTP responses."""
from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..errors import SerializationFault
from ..statuses import reason_phrase
from ..utils.config import ENSURE_ASCII, ESCAPE_HTML, TRAILING_NEWLINE


class Envelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: int
    data: Any = None


def build_envelope(code: int, *data: object) -> Envelope:
    """Wrap the first payload value, or the reason phrase when none is given.

    Values after the first are ignored.
    """

    payload = data[0] if data else reason_phrase(code)
    return Envelope(code=code, data=payload)


_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _check_keys(value: object, active: set[int]) -> None:
    # Mapping keys must be str or int and stay distinct once stringified.
    if isinstance(value, dict):
        if id(value) in active:
            raise ValueError("Circular reference detected")
        active.add(id(value))
        seen: set[str] = set()
        for key, item in value.items():
            if isinstance(key, bool) or not isinstance(key, (str, int)):
                raise TypeError(
                    f"keys must be str or int, not {type(key).__name__}"
                )
            text = str(key)
            if text in seen:
                raise TypeError(f"duplicate key {text!r} after conversion to string")
            seen.add(text)
            _check_keys(item, active)
        active.discard(id(value))
    elif isinstance(value, (list, tuple)):
        if id(value) in active:
            raise ValueError("Circular reference detected")
        active.add(id(value))
        for item in value:
            _check_keys(item, active)
        active.discard(id(value))


def encode_envelope(
    envelope: Envelope,
    *,
    ensure_ascii: bool = ENSURE_ASCII,
    escape_html: bool = ESCAPE_HTML,
    trailing_newline: bool = TRAILING_NEWLINE,
) -> bytes:
    """Serialize ``envelope`` to compact UTF-8 JSON.

    Raises ``SerializationFault`` when the payload has no faithful JSON
    representation: unsupported values, non-finite floats, cycles, mapping
    keys other than ``str``/``int``, or keys that collide once stringified.
    With ``escape_html`` the characters ``<``, ``>``, ``&``, U+2028 and
    U+2029 are written as ``\\u`` escapes.
    """

    try:
        _check_keys(envelope.data, set())
        text = json.dumps(
            {"code": envelope.code, "data": envelope.data},
            ensure_ascii=ensure_ascii,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as exc:
        raise SerializationFault(envelope.code, exc) from exc
    if escape_html:
        # These characters only ever occur inside JSON string literals.
        for char, escaped in _HTML_ESCAPES.items():
            text = text.replace(char, escaped)
    if trailing_newline:
        text += "\n"
    return text.encode("utf-8")


__all__ = ["Envelope", "build_envelope", "encode_envelope"]
