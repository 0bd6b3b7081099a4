"""
Test cases for Unicode handling.

Covers \\u escapes, surrogate pairs in both decoding modes, and raw non-ASCII text.
"""

import unittest

import jsontree
from jsontree.core.values import JSONObject, JSONString


class TestUnicodeEscapes(unittest.TestCase):
    """Test basic multilingual plane escapes."""

    def test_bmp_escapes(self):
        cases = [
            ('"\\u0041\\u0042"', "AB"),
            ('"\\u00e9"', "é"),
            ('"\\u4e2d\\u6587"', "中文"),
            ('"\\u0000"', "\x00"),
            ('"\\uFFFF"', "\uffff"),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertEqual(jsontree.parse(text), JSONString(expected))

    def test_escapes_in_keys(self):
        result = jsontree.parse('{"\\u006b\\u0065\\u0079": 1}')
        self.assertIn("key", result.as_object())

    def test_raw_astral_characters(self):
        self.assertEqual(jsontree.parse('"😀 𝄞"').as_string(), "😀 𝄞")


class TestSurrogatePairs(unittest.TestCase):
    """Test surrogate escapes with and without pairing."""

    def test_pair_combines_by_default(self):
        self.assertEqual(jsontree.parse('"\\ud83d\\ude00"').as_string(), "\U0001F600")
        self.assertEqual(jsontree.parse('"\\uD834\\uDD1E"').as_string(), "\U0001D11E")

    def test_pair_inside_text(self):
        result = jsontree.parse('"a\\ud83d\\ude00b"')
        self.assertEqual(result.as_string(), "a\U0001F600b")

    def test_independent_decoding_when_disabled(self):
        result = jsontree.parse('"\\ud83d\\ude00"', combine_surrogates=False)
        self.assertEqual(result.as_string(), "��")

    def test_lone_high_surrogate(self):
        self.assertEqual(jsontree.parse('"\\ud83d"').as_string(), "�")
        self.assertEqual(jsontree.parse('"\\ud83dx"').as_string(), "�x")

    def test_high_surrogate_followed_by_non_surrogate_escape(self):
        self.assertEqual(jsontree.parse('"\\ud83d\\u0041"').as_string(), "�A")
        self.assertEqual(jsontree.parse('"\\ud83d\\n"').as_string(), "�\n")

    def test_two_high_surrogates(self):
        result = jsontree.parse('"\\ud83d\\ud83d\\ude00"')
        self.assertEqual(result.as_string(), "�\U0001F600")

    def test_lone_low_surrogate(self):
        self.assertEqual(jsontree.parse('"\\ude00"').as_string(), "�")

    def test_bad_escape_after_high_surrogate_is_reported(self):
        with self.assertRaises(jsontree.ExpectedUnicodeEscape):
            jsontree.parse('"\\ud83d\\u12"')

    def test_results_are_valid_text(self):
        """Decoded strings never contain unpaired surrogates."""
        for text in ['"\\ud83d"', '"\\ude00\\ud83d"', '"\\ud800\\udc00"']:
            with self.subTest(text=text):
                value = jsontree.parse(text).as_string()
                value.encode("utf-8")


class TestWhitespace(unittest.TestCase):

    def test_unicode_whitespace_is_not_json_whitespace(self):
        with self.assertRaises(jsontree.UnexpectedToken):
            jsontree.parse("\u00a0[]")

    def test_unicode_whitespace_inside_strings_is_kept(self):
        result = jsontree.parse('{"a": "\u2003"}')
        self.assertEqual(result, JSONObject({"a": JSONString("\u2003")}))


if __name__ == "__main__":
    unittest.main()
