"""
Test cases for parsing configuration.

Tests focus on defaults, flat keyword options, and validation of limits.
"""

import unittest

import jsontree
from jsontree.utils.config import (
    ErrorReporting,
    ParseConfig,
    ParseLimits,
    ParsingBehavior,
    SizeLimits,
    StructureLimits,
)


class TestParseLimits(unittest.TestCase):
    """Test ParseLimits construction."""

    def test_defaults(self):
        limits = ParseLimits()
        self.assertEqual(limits.max_input_size, 10 * 1024 * 1024)
        self.assertEqual(limits.max_nesting_depth, 200)
        self.assertEqual(limits.max_number_length, 100)

    def test_flat_arguments(self):
        limits = ParseLimits(max_string_length=10, max_object_keys=3)
        self.assertEqual(limits.max_string_length, 10)
        self.assertEqual(limits.max_object_keys, 3)
        # Untouched fields keep their defaults.
        self.assertEqual(limits.max_array_items, 100000)

    def test_nested_arguments(self):
        limits = ParseLimits(
            size_limits=SizeLimits(max_input_size=5),
            structure_limits=StructureLimits(max_nesting_depth=2),
        )
        self.assertEqual(limits.max_input_size, 5)
        self.assertEqual(limits.max_nesting_depth, 2)

    def test_non_positive_limits_rejected(self):
        with self.assertRaises(ValueError):
            ParseLimits(max_input_size=0)
        with self.assertRaises(ValueError):
            ParseLimits(max_nesting_depth=-1)


class TestParseConfig(unittest.TestCase):
    """Test ParseConfig defaults and property accessors."""

    def test_defaults(self):
        config = ParseConfig()
        self.assertFalse(config.allow_trailing_content)
        self.assertTrue(config.combine_surrogates)
        self.assertTrue(config.include_context)
        self.assertTrue(config.include_suggestions)
        self.assertEqual(config.max_error_context, 40)
        self.assertIsInstance(config.limits, ParseLimits)

    def test_flat_options(self):
        config = ParseConfig(
            allow_trailing_content=True, combine_surrogates=False, max_error_context=10
        )
        self.assertTrue(config.allow_trailing_content)
        self.assertFalse(config.combine_surrogates)
        self.assertEqual(config.max_error_context, 10)

    def test_structured_options(self):
        config = ParseConfig(
            behavior=ParsingBehavior(allow_trailing_content=True),
            error_reporting=ErrorReporting(include_context=False),
        )
        self.assertTrue(config.allow_trailing_content)
        self.assertFalse(config.include_context)

    def test_setters_update_nested_settings(self):
        config = ParseConfig()
        config.allow_trailing_content = True
        config.combine_surrogates = False
        config.include_suggestions = False
        self.assertTrue(config.behavior.allow_trailing_content)
        self.assertFalse(config.behavior.combine_surrogates)
        self.assertFalse(config.error_reporting.include_suggestions)

    def test_config_overrides_keyword_options(self):
        config = ParseConfig(allow_trailing_content=False)
        with self.assertRaises(jsontree.ExpectedEndOfInput):
            jsontree.parse("1 2", allow_trailing_content=True, config=config)

    def test_flat_limit_options(self):
        config = ParseConfig(max_nesting_depth=3, max_string_length=8)
        self.assertEqual(config.limits.max_nesting_depth, 3)
        self.assertEqual(config.limits.max_string_length, 8)

    def test_unknown_options_rejected(self):
        with self.assertRaises(TypeError) as cm:
            ParseConfig(fallback=True)
        self.assertIn("fallback", str(cm.exception))
        with self.assertRaises(TypeError):
            ParseLimits(max_depth=3)

    def test_configs_compare_by_value(self):
        self.assertEqual(ParseConfig(), ParseConfig())
        self.assertNotEqual(ParseConfig(), ParseConfig(combine_surrogates=False))


if __name__ == '__main__':
    unittest.main()
