import datetime as _dt
import io
import math
import unittest

import pandas as pd

from raml_validate import datatypes


class ScalarTypeTests(unittest.TestCase):
    def test_string(self):
        self.assertTrue(datatypes.is_string(""))
        self.assertFalse(datatypes.is_string(b"bytes"))

    def test_number_excludes_non_finite_and_bools(self):
        for good in (0, -1, 1.5, 10 ** 20):
            self.assertTrue(datatypes.is_number(good), good)
        for bad in (math.nan, math.inf, -math.inf, True, "1", None):
            self.assertFalse(datatypes.is_number(bad), bad)

    def test_integer(self):
        for good in (0, -123, 5.0):
            self.assertTrue(datatypes.is_integer(good), good)
        for bad in (123.5, -0.5, math.inf, False, "1"):
            self.assertFalse(datatypes.is_integer(bad), bad)

    def test_boolean(self):
        self.assertTrue(datatypes.is_boolean(False))
        self.assertFalse(datatypes.is_boolean(0))


class DateTypeTests(unittest.TestCase):
    def test_date_objects(self):
        self.assertTrue(datatypes.is_date(_dt.date(2025, 1, 1)))
        self.assertTrue(datatypes.is_date(_dt.datetime.now(_dt.timezone.utc)))
        self.assertTrue(datatypes.is_date(pd.Timestamp("2025-06-01T00:00:00Z")))

    def test_invalid_dates(self):
        self.assertFalse(datatypes.is_date(pd.NaT))
        self.assertFalse(datatypes.is_date("2025-01-01"))
        self.assertFalse(datatypes.is_date(1735689600))


class FileAndSentinelTypeTests(unittest.TestCase):
    def test_file(self):
        for good in ("contents", b"\x00\x01", {"name": "a.txt"}, io.BytesIO(b"x")):
            self.assertTrue(datatypes.is_file(good), good)
        for bad in (1, 2.5, True):
            self.assertFalse(datatypes.is_file(bad), bad)

    def test_any_type_always_passes(self):
        for value in ("x", 1, None, [], {}, object()):
            self.assertTrue(datatypes.any_type(value))

    def test_unknown_type_always_fails(self):
        for value in ("x", 1, None, [], {}):
            self.assertFalse(datatypes.unknown_type(value))

    def test_builtin_table(self):
        self.assertEqual(
            set(datatypes.TYPES),
            {"string", "number", "integer", "boolean", "date", "file"},
        )
