"""Named responders, one per status code in the table.

Every helper is ``respond`` with its status code fixed::

    not_found(sink)                  # {"code":404,"data":"Not Found"}
    created(sink, {"id": 7})         # {"code":201,"data":{"id":7}}

The functions are generated from ``jsonreply.statuses.STATUSES``; aliases
point at the same function object as their canonical name.
"""
from __future__ import annotations

from typing import Callable

from ..statuses import STATUSES, StatusEntry
from .responder import ResponseSink, respond

Helper = Callable[..., None]


def _make_helper(entry: StatusEntry) -> Helper:
    code = entry.code

    def helper(sink: ResponseSink, *data: object) -> None:
        respond(sink, code, *data)

    helper.__name__ = helper.__qualname__ = entry.name
    helper.__module__ = __name__
    helper.__doc__ = f"Write data with status code {code}."
    helper.status_code = code  # type: ignore[attr-defined]
    return helper


_BY_CODE: dict[int, Helper] = {entry.code: _make_helper(entry) for entry in STATUSES}

HELPERS: dict[str, Helper] = {
    name: _BY_CODE[entry.code]
    for entry in STATUSES
    for name in (entry.name, *entry.aliases)
}

globals().update(HELPERS)


class Responder:
    """Bundles ``respond`` and every named helper behind one object.

    Useful where a handler wants a single dependency rather than importing
    helpers one by one::

        responder.teapot(sink)
    """

    @staticmethod
    def respond(sink: ResponseSink, status_code: int, *data: object) -> None:
        respond(sink, status_code, *data)


for _name, _helper in HELPERS.items():
    setattr(Responder, _name, staticmethod(_helper))

del _name, _helper

DEFAULT_RESPONDER = Responder()


__all__ = ["DEFAULT_RESPONDER", "HELPERS", "Helper", "Responder", *HELPERS]
