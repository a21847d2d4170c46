import re
import unittest

from raml_validate import rules
from tests._util import error, errors_of, run


class BoundTests(unittest.TestCase):
    def test_inclusive_numeric_bounds(self):
        self.assertTrue(rules.minimum(5)(5))
        self.assertFalse(rules.minimum(5)(4.99))
        self.assertTrue(rules.maximum(5)(5))
        self.assertFalse(rules.maximum(5)(5.01))

    def test_incomparable_values_fail(self):
        self.assertFalse(rules.minimum(5)("6"))
        self.assertFalse(rules.maximum(5)(None))


class ByteLengthTests(unittest.TestCase):
    def test_byte_length(self):
        self.assertEqual(rules.byte_length("abc"), 3)
        self.assertEqual(rules.byte_length("é"), 2)
        self.assertEqual(rules.byte_length("日本"), 6)
        self.assertEqual(rules.byte_length(b"abcd"), 4)
        self.assertIsNone(rules.byte_length(42))

    def test_ascii_over_limit(self):
        result = run({"p": {"type": "string", "maxLength": 5}}, {"p": "abcdef"})
        self.assertEqual(errors_of(result), [error("maxLength", "abcdef", key="p", attr=5)])

    def test_multibyte_measured_in_bytes(self):
        schema = {"p": {"type": "string", "maxLength": 5}}
        self.assertTrue(run(schema, {"p": "aéb"}).valid)      # 4 bytes
        self.assertTrue(run(schema, {"p": "aaaé"}).valid)     # 5 bytes
        self.assertFalse(run(schema, {"p": "日本"}).valid)     # 2 chars, 6 bytes

    def test_min_length_counts_bytes(self):
        self.assertTrue(rules.min_length(4)("日本"))
        self.assertFalse(rules.min_length(4)("abc"))

    def test_unsized_values_fail(self):
        self.assertFalse(rules.min_length(0)(12))
        self.assertFalse(rules.max_length(10)(12))


class EnumTests(unittest.TestCase):
    def test_membership(self):
        check = rules.enum(["small", "medium", "large"])
        self.assertTrue(check("small"))
        self.assertFalse(check("extra large"))

    def test_strict_equality(self):
        self.assertFalse(rules.enum([1])(True))
        self.assertFalse(rules.enum([True])(1))
        self.assertFalse(rules.enum(["1"])(1))
        self.assertTrue(rules.enum([1])(1.0))


class PatternTests(unittest.TestCase):
    def test_unanchored_search(self):
        self.assertTrue(rules.pattern(r"\d+")("abc123def"))
        self.assertFalse(rules.pattern(r"^\d+$")("abc123def"))

    def test_precompiled_pattern(self):
        regex = re.compile(r"^[a-z]+$", re.IGNORECASE)
        self.assertTrue(rules.pattern(regex)("ABC"))

    def test_non_string_fails(self):
        self.assertFalse(rules.pattern(r"\d")(123))


class RuleTableTests(unittest.TestCase):
    def test_factories_receive_name(self):
        for name, factory in rules.RULES.items():
            with self.subTest(rule=name):
                param = {"enum": [], "pattern": "x"}.get(name, 1)
                self.assertTrue(callable(factory(param, name)))
