import ast
import json
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import jsonreply
from jsonreply.api import helpers
from jsonreply.api.helpers import DEFAULT_RESPONDER, HELPERS, Responder
from jsonreply.api.responder import respond
from jsonreply.errors import SerializationFault
from jsonreply.statuses import STATUSES
from jsonreply.web import BufferedSink


def _write(call, *args):
    sink = BufferedSink()
    call(sink, *args)
    return sink.status_code, dict(sink.headers), bytes(sink.body)


class NamedHelperTests(unittest.TestCase):
    def test_every_status_has_a_helper(self):
        for entry in STATUSES:
            with self.subTest(name=entry.name):
                helper = HELPERS[entry.name]
                self.assertEqual(helper.status_code, entry.code)
                self.assertEqual(helper.__name__, entry.name)
                for alias in entry.aliases:
                    self.assertIs(HELPERS[alias], helper)

    def test_helpers_match_generic_call(self):
        payloads = [(), ("hello",), (None,), ({"id": 3}, "extra")]
        for entry in STATUSES:
            helper = HELPERS[entry.name]
            for payload in payloads:
                with self.subTest(name=entry.name, payload=payload):
                    expected = _write(lambda sink, *p: respond(sink, entry.code, *p), *payload)
                    self.assertEqual(_write(helper, *payload), expected)

    def test_helpers_set_transport_status(self):
        for entry in STATUSES:
            with self.subTest(name=entry.name):
                status, _, body = _write(HELPERS[entry.name])
                self.assertEqual(status, entry.code)
                self.assertEqual(
                    json.loads(body), {"code": entry.code, "data": entry.phrase}
                )

    def test_teapot(self):
        status, _, body = _write(helpers.teapot)

        self.assertEqual(status, 418)
        self.assertEqual(body, b'{"code":418,"data":"I\'m a teapot"}')

    def test_helpers_exported_from_package(self):
        self.assertIs(jsonreply.not_found, HELPERS["not_found"])
        self.assertIs(jsonreply.continue_, HELPERS["continue_"])
        self.assertIn("teapot", jsonreply.__all__)

    def test_helper_propagates_fault(self):
        sink = BufferedSink()
        with self.assertRaises(SerializationFault):
            helpers.ok(sink, {frozenset(): 1})
        self.assertIsNone(sink.status_code)


class HelperStubTests(unittest.TestCase):
    def test_stub_lists_every_generated_name(self):
        stub = Path(helpers.__file__).with_suffix(".pyi")
        tree = ast.parse(stub.read_text(encoding="utf-8"))
        functions = {
            node.name for node in tree.body if isinstance(node, ast.FunctionDef)
        }
        responder = next(
            node
            for node in tree.body
            if isinstance(node, ast.ClassDef) and node.name == "Responder"
        )
        methods = {
            node.name for node in responder.body if isinstance(node, ast.FunctionDef)
        }

        self.assertEqual(functions, set(HELPERS))
        self.assertEqual(methods, set(HELPERS) | {"respond"})


class ResponderTests(unittest.TestCase):
    def test_methods_bound_for_every_name(self):
        for name, helper in HELPERS.items():
            with self.subTest(name=name):
                self.assertIs(getattr(Responder, name), helper)

    def test_respond_method(self):
        responder = Responder()
        sink = BufferedSink()

        responder.respond(sink, 202, [1, 2])

        self.assertEqual(sink.status_code, 202)
        self.assertEqual(bytes(sink.body), b'{"code":202,"data":[1,2]}')

    def test_default_instance_methods(self):
        sink = BufferedSink()

        DEFAULT_RESPONDER.not_found(sink)

        self.assertEqual(bytes(sink.body), b'{"code":404,"data":"Not Found"}')


if __name__ == "__main__":
    unittest.main()
