"""
Test cases for IEEE 754 floating point edge cases and number handling.

These tests ensure jsontree converts numeric literals exactly as float() does,
including overflow, underflow and precision loss.
"""

import math
import sys
import unittest

import jsontree


class TestIEEE754EdgeCases(unittest.TestCase):
    """Test IEEE 754 floating point edge cases."""

    def test_overflow_to_infinity(self):
        self.assertEqual(jsontree.parse("1e309").as_number(), math.inf)
        self.assertEqual(jsontree.parse("-1e309").as_number(), -math.inf)

    def test_underflow_to_zero(self):
        self.assertEqual(jsontree.parse("1e-400").as_number(), 0.0)

    def test_extremes(self):
        self.assertEqual(
            jsontree.parse(repr(sys.float_info.max)).as_number(), sys.float_info.max
        )
        self.assertEqual(
            jsontree.parse(repr(sys.float_info.min)).as_number(), sys.float_info.min
        )
        self.assertEqual(jsontree.parse("5e-324").as_number(), 5e-324)

    def test_negative_zero(self):
        value = jsontree.parse("-0").as_number()
        self.assertEqual(value, 0.0)
        self.assertEqual(math.copysign(1.0, value), -1.0)

    def test_decimal_fractions_are_inexact(self):
        self.assertEqual(jsontree.parse("0.1").as_number(), float("0.1"))
        self.assertEqual(jsontree.loads("[0.1, 0.2]"), [0.1, 0.2])
        self.assertNotEqual(sum(jsontree.loads("[0.1, 0.2]")), 0.3)

    def test_integer_precision_boundary(self):
        self.assertEqual(jsontree.parse("9007199254740992").as_number(), 2.0 ** 53)
        self.assertEqual(jsontree.parse("9007199254740993").as_number(), 2.0 ** 53)

    def test_non_finite_literals_are_rejected(self):
        for text in ["NaN", "Infinity", "inf"]:
            with self.subTest(text=text):
                with self.assertRaises(jsontree.UnexpectedToken):
                    jsontree.parse(text)
        with self.assertRaises(jsontree.ExpectedDigit):
            jsontree.parse("-Infinity")

    def test_forms_float_accepts_but_json_does_not(self):
        cases = {
            "+1": jsontree.UnexpectedToken,
            ".5": jsontree.UnexpectedToken,
            "1_000": jsontree.ExpectedEndOfInput,
            "0x10": jsontree.ExpectedEndOfInput,
            "1.e3": jsontree.ExpectedDigit,
        }
        for text, error_class in cases.items():
            with self.subTest(text=text):
                with self.assertRaises(error_class):
                    jsontree.parse(text)


if __name__ == "__main__":
    unittest.main()
