"""
Test Response Documents - decoding, emptiness and envelope helpers
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from simplecurl.transformation.documents import (
    JsonObject,
    as_list,
    decode,
    has_errors,
    is_blank,
    missing_fields,
    unwrap,
)


class TestDecode(unittest.TestCase):
    def test_object_mode_allows_attribute_access(self):
        document = decode('{"user": {"name": "Ann"}, "tags": [{"id": 1}]}')

        self.assertIsInstance(document, JsonObject)
        self.assertEqual(document.user.name, "Ann")
        self.assertEqual(document.tags[0].id, 1)
        self.assertEqual(document, {"user": {"name": "Ann"}, "tags": [{"id": 1}]})

    def test_array_mode_returns_plain_dicts(self):
        document = decode('{"user": {"name": "Ann"}}', as_object=False)

        self.assertIs(type(document), dict)
        self.assertIs(type(document["user"]), dict)

    def test_missing_attribute_raises_attribute_error(self):
        document = decode('{"a": 1}')

        with self.assertRaises(AttributeError):
            document.b

    def test_non_string_and_malformed_payloads_decode_to_none(self):
        self.assertIsNone(decode(None))
        self.assertIsNone(decode({"a": 1}))
        self.assertIsNone(decode(b'{"a": 1}'))
        self.assertIsNone(decode("{not json"))


class TestHelpers(unittest.TestCase):
    def test_is_blank(self):
        for value in (None, False, 0, 0.0, "", "0", [], {}, JsonObject()):
            self.assertTrue(is_blank(value), value)
        for value in (True, 1, "a", "00", [0], {"a": None}):
            self.assertFalse(is_blank(value), value)

    def test_has_errors(self):
        self.assertTrue(has_errors({"errors": ["bad"]}))
        self.assertTrue(has_errors({"errors": {"field": "required"}}))
        self.assertFalse(has_errors({"errors": []}))
        self.assertFalse(has_errors({"errors": None}))
        self.assertFalse(has_errors([{"errors": ["bad"]}]))

    def test_unwrap(self):
        self.assertEqual(unwrap({"data": {"x": 1}}, "data"), {"x": 1})
        self.assertEqual(unwrap({"data": {"x": 1}}, ""), {"data": {"x": 1}})
        self.assertIsNone(unwrap({"data": []}, "data"))
        self.assertIsNone(unwrap({"other": 1}, "data"))
        self.assertIsNone(unwrap([1, 2], "data"))
        self.assertIsNone(unwrap(None, "data"))
        self.assertIsNone(unwrap({}, "data"))
        self.assertIsNone(unwrap([], "data"))
        self.assertEqual(unwrap({}, ""), {})

    def test_missing_fields_treats_null_as_missing(self):
        document = {"total": 5, "per_page": None, "data": []}

        self.assertEqual(
            missing_fields(document, "total", "per_page", "current_page", "data"),
            ["per_page", "current_page"],
        )
        self.assertEqual(missing_fields(None, "total"), ["total"])

    def test_as_list(self):
        self.assertEqual(as_list(None), [])
        self.assertEqual(as_list([1, 2]), [1, 2])
        self.assertEqual(as_list({"a": 1}), [{"a": 1}])


if __name__ == "__main__":
    unittest.main()
