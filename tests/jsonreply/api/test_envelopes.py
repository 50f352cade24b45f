import json
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jsonreply.api.envelopes import Envelope, build_envelope, encode_envelope
from jsonreply.errors import SerializationFault


def test_build_envelope_defaults_to_reason_phrase():
    envelope = build_envelope(503)

    assert envelope.code == 503
    assert envelope.data == "Service Unavailable"


def test_build_envelope_keeps_payload_identity():
    payload = {"items": [1, 2]}

    envelope = build_envelope(200, payload, "ignored")

    assert envelope.data is payload


def test_envelope_is_frozen():
    envelope = build_envelope(200, "x")

    with pytest.raises(ValidationError):
        envelope.code = 500


def test_encode_is_compact_utf8():
    body = encode_envelope(Envelope(code=200, data={"msg": "héllo", "n": [1, 2]}), ensure_ascii=False)

    assert body == '{"code":200,"data":{"msg":"héllo","n":[1,2]}}'.encode("utf-8")


def test_encode_options():
    envelope = Envelope(code=201, data="é")

    assert encode_envelope(envelope, ensure_ascii=True) == b'{"code":201,"data":"\\u00e9"}'
    assert encode_envelope(envelope, trailing_newline=True).endswith(b"}\n")


def test_encode_orders_code_before_data():
    body = encode_envelope(Envelope(code=404, data=None))

    assert list(json.loads(body)) == ["code", "data"]


def test_encode_rejects_unsupported_keys():
    with pytest.raises(SerializationFault) as excinfo:
        encode_envelope(Envelope(code=404, data={(True,): ""}))

    assert isinstance(excinfo.value.__cause__, TypeError)
    assert "status 404" in str(excinfo.value)


def test_encode_rejects_bool_keys():
    with pytest.raises(SerializationFault) as excinfo:
        encode_envelope(Envelope(code=404, data={True: ""}))

    assert isinstance(excinfo.value.__cause__, TypeError)


def test_encode_rejects_keys_colliding_as_text():
    with pytest.raises(SerializationFault):
        encode_envelope(Envelope(code=200, data=[{"7": 1, 7: 2}]))


def test_encode_allows_shared_values_without_cycles():
    shared = {"a": 1}

    body = encode_envelope(Envelope(code=200, data=[shared, shared]), ensure_ascii=False)

    assert json.loads(body)["data"] == [{"a": 1}, {"a": 1}]


def test_encode_escape_html():
    envelope = Envelope(code=200, data="<b>fish & chips</b>\u2028")

    escaped = encode_envelope(envelope, escape_html=True)
    plain = encode_envelope(envelope, escape_html=False, ensure_ascii=False)

    assert escaped == b'{"code":200,"data":"\\u003cb\\u003efish \\u0026 chips\\u003c/b\\u003e\\u2028"}'
    assert b"<b>fish & chips</b>" in plain
    assert json.loads(escaped) == json.loads(plain)
