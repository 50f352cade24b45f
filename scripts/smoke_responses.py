#!/usr/bin/env python3
"""
Lightweight smoke check for jsonreply.

Writes a handful of envelopes into buffered sinks and prints the status,
content type and body of each.
"""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jsonreply import created, not_found, respond, teapot  # noqa: E402
from jsonreply.web import BufferedSink  # noqa: E402


def main() -> None:
    calls = [
        ("respond(200, 'hello')", lambda sink: respond(sink, 200, "hello")),
        ("not_found()", lambda sink: not_found(sink)),
        ("created({'id': 7})", lambda sink: created(sink, {"id": 7})),
        ("teapot()", lambda sink: teapot(sink)),
        ("respond(599)", lambda sink: respond(sink, 599)),
    ]
    for label, call in calls:
        sink = BufferedSink()
        call(sink)
        print(f"[smoke] {label}: {sink.status_code} {sink.headers['Content-Type']} {bytes(sink.body).decode()}")
    print("[smoke] Done.")


if __name__ == "__main__":  # pragma: no cover
    main()
