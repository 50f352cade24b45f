"""Static table of HTTP status codes, helper names and reason phrases."""
from __future__ import annotations

from typing import NamedTuple


class StatusEntry(NamedTuple):
    code: int
    name: str
    phrase: str
    aliases: tuple[str, ...] = ()


STATUSES: tuple[StatusEntry, ...] = (
    # 1xx
    StatusEntry(100, "continue_", "Continue"),
    StatusEntry(101, "switching_protocols", "Switching Protocols"),
    StatusEntry(102, "processing", "Processing"),
    StatusEntry(103, "early_hints", "Early Hints"),
    # 2xx
    StatusEntry(200, "ok", "OK"),
    StatusEntry(201, "created", "Created"),
    StatusEntry(202, "accepted", "Accepted"),
    StatusEntry(203, "non_authoritative_info", "Non-Authoritative Information"),
    StatusEntry(204, "no_content", "No Content"),
    StatusEntry(205, "reset_content", "Reset Content"),
    StatusEntry(206, "partial_content", "Partial Content"),
    StatusEntry(207, "multi_status", "Multi-Status"),
    StatusEntry(208, "already_reported", "Already Reported"),
    StatusEntry(226, "im_used", "IM Used"),
    # 3xx
    StatusEntry(300, "multiple_choices", "Multiple Choices"),
    StatusEntry(301, "moved_permanently", "Moved Permanently"),
    StatusEntry(302, "found", "Found"),
    StatusEntry(303, "see_other", "See Other"),
    StatusEntry(304, "not_modified", "Not Modified"),
    StatusEntry(305, "use_proxy", "Use Proxy"),
    # Reserved and unused in the registry, so it carries no phrase.
    StatusEntry(306, "switch_proxy", ""),
    StatusEntry(307, "temporary_redirect", "Temporary Redirect"),
    StatusEntry(308, "permanent_redirect", "Permanent Redirect"),
    # 4xx
    StatusEntry(400, "bad_request", "Bad Request"),
    StatusEntry(401, "unauthorized", "Unauthorized"),
    StatusEntry(402, "payment_required", "Payment Required"),
    StatusEntry(403, "forbidden", "Forbidden"),
    StatusEntry(404, "not_found", "Not Found"),
    StatusEntry(405, "method_not_allowed", "Method Not Allowed"),
    StatusEntry(406, "not_acceptable", "Not Acceptable"),
    StatusEntry(
        407,
        "proxy_authentication_required",
        "Proxy Authentication Required",
        ("proxy_auth_required",),
    ),
    StatusEntry(408, "request_timeout", "Request Timeout"),
    StatusEntry(409, "conflict", "Conflict"),
    StatusEntry(410, "gone", "Gone"),
    StatusEntry(411, "length_required", "Length Required"),
    StatusEntry(412, "precondition_failed", "Precondition Failed"),
    StatusEntry(
        413,
        "payload_too_large",
        "Request Entity Too Large",
        ("request_entity_too_large",),
    ),
    StatusEntry(414, "uri_too_long", "Request URI Too Long", ("request_uri_too_long",)),
    StatusEntry(415, "unsupported_media_type", "Unsupported Media Type"),
    StatusEntry(
        416,
        "range_not_satisfiable",
        "Requested Range Not Satisfiable",
        ("requested_range_not_satisfiable",),
    ),
    StatusEntry(417, "expectation_failed", "Expectation Failed"),
    StatusEntry(418, "teapot", "I'm a teapot", ("im_a_teapot",)),
    StatusEntry(421, "misdirected_request", "Misdirected Request"),
    StatusEntry(422, "unprocessable_entity", "Unprocessable Entity"),
    StatusEntry(423, "locked", "Locked"),
    StatusEntry(424, "failed_dependency", "Failed Dependency"),
    StatusEntry(425, "too_early", "Too Early"),
    StatusEntry(426, "upgrade_required", "Upgrade Required"),
    StatusEntry(428, "precondition_required", "Precondition Required"),
    StatusEntry(429, "too_many_requests", "Too Many Requests"),
    StatusEntry(431, "request_header_fields_too_large", "Request Header Fields Too Large"),
    StatusEntry(451, "unavailable_for_legal_reasons", "Unavailable For Legal Reasons"),
    # 5xx
    StatusEntry(500, "internal_server_error", "Internal Server Error"),
    StatusEntry(501, "not_implemented", "Not Implemented"),
    StatusEntry(502, "bad_gateway", "Bad Gateway"),
    StatusEntry(503, "service_unavailable", "Service Unavailable"),
    StatusEntry(504, "gateway_timeout", "Gateway Timeout"),
    StatusEntry(505, "http_version_not_supported", "HTTP Version Not Supported"),
    StatusEntry(506, "variant_also_negotiates", "Variant Also Negotiates"),
    StatusEntry(507, "insufficient_storage", "Insufficient Storage"),
    StatusEntry(508, "loop_detected", "Loop Detected"),
    StatusEntry(510, "not_extended", "Not Extended"),
    StatusEntry(511, "network_authentication_required", "Network Authentication Required"),
)

_BY_CODE: dict[int, StatusEntry] = {entry.code: entry for entry in STATUSES}
_BY_NAME: dict[str, StatusEntry] = {
    name: entry for entry in STATUSES for name in (entry.name, *entry.aliases)
}


def reason_phrase(code: int) -> str:
    """Return the reason phrase for ``code``, or an empty string if unknown."""

    entry = _BY_CODE.get(code)
    return entry.phrase if entry is not None else ""


def lookup(key: int | str) -> StatusEntry:
    """Find a table row by status code or by helper/alias name.

    Raises ``KeyError`` when nothing matches.
    """

    if isinstance(key, int) and not isinstance(key, bool):
        return _BY_CODE[key]
    if isinstance(key, str):
        return _BY_NAME[key]
    raise KeyError(key)


__all__ = ["STATUSES", "StatusEntry", "lookup", "reason_phrase"]
