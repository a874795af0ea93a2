from unittest import TestCase

from onpage._util import (get_id_or_none, get_id_or_raise, get_or_raise,
                          is_numeric, to_number)
from onpage.errors import SchemaError


class UtilTest(TestCase):
  def test_is_numeric(self):
    for value in [0, 42, -1, 4.2, "42", " 42 ", "-42", "+4.2", ".5", "5.", "1e3", "1E-3"]:
      self.assertTrue(is_numeric(value), value)
    for value in [True, False, None, "", " ", "4x", "0x1A", "inf", "nan", "1_000", "1e", ".", [1], "\u0664\u0662", "\uff14\uff12"]:
      self.assertFalse(is_numeric(value), value)

  def test_to_number(self):
    self.assertEqual(to_number(7), 7)
    self.assertEqual(to_number(" 42 "), 42)
    self.assertIsInstance(to_number("42"), int)
    self.assertEqual(to_number("-4.5"), -4.5)
    self.assertEqual(to_number("1e2"), 100.0)

  def test_get_or_raise(self):
    self.assertEqual(get_or_raise({"a": 1}, "a", "Thing"), 1)
    self.assertRaisesRegex(SchemaError, "Thing payload does not contain required key 'b'",
                           lambda: get_or_raise({"a": 1}, "b", "Thing"))
    self.assertRaises(SchemaError, lambda: get_or_raise(None, "a", "Thing"))

  def test_get_id_or_raise(self):
    self.assertEqual(get_id_or_raise({"id": 10}, "id", "Field"), 10)
    self.assertEqual(get_id_or_raise({"id": "10"}, "id", "Field"), 10)
    self.assertIsInstance(get_id_or_raise({"id": "10"}, "id", "Field"), int)
    for bad in ["ten", "", None, True, "٤٢", [10]]:
      self.assertRaises(SchemaError, lambda: get_id_or_raise({"id": bad}, "id", "Field"))
    self.assertRaises(SchemaError, lambda: get_id_or_raise({}, "id", "Field"))

  def test_get_id_or_none(self):
    self.assertIsNone(get_id_or_none({}, "rel_res_id", "Field"))
    self.assertIsNone(get_id_or_none({"rel_res_id": None}, "rel_res_id", "Field"))
    self.assertEqual(get_id_or_none({"rel_res_id": " 2 "}, "rel_res_id", "Field"), 2)
    self.assertRaisesRegex(SchemaError, "Field payload has non-numeric rel_res_id 'two'",
                           lambda: get_id_or_none({"rel_res_id": "two"}, "rel_res_id", "Field"))
