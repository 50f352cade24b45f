"""Exception types raised by jsonreply."""
from __future__ import annotations


class JsonReplyError(RuntimeError):
    """Base class for jsonreply failures."""


class SerializationFault(JsonReplyError):
    """Raised when a payload has no JSON representation.

    This is a programming error in the caller. The responder never catches it,
    so the request-handling unit aborts before anything reaches the sink.
    """

    def __init__(self, status_code: int, cause: BaseException) -> None:
        super().__init__(f"cannot encode response for status {status_code}: {cause}")
        self.status_code = status_code
        self.cause = cause


__all__ = ["JsonReplyError", "SerializationFault"]
