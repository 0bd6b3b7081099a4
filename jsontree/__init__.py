"""
jsontree - a small, strict JSON reader that builds an immutable value tree.

jsontree parses JSON text into typed values (object, array, string, number,
true, false, null) and reports malformed input with a precise error kind.

Key Features:
- Immutable value tree with typed narrowing (as_object, as_number, ...)
- One exception class per failure kind, all sharing ParseError
- Surrogate-pair aware \\u decoding
- Rejects trailing content after the top-level value (configurable)
- Resource limits against oversized or deeply nested input

Quick Start:
    import jsontree
    tree = jsontree.parse('{"a": [1, 2, 3]}')
    numbers = tree.as_object()["a"].as_array()

    # Plain Python objects
    data = jsontree.loads('{"a": [1, 2, 3]}')  # {'a': [1.0, 2.0, 3.0]}

    # Error handling
    try:
        jsontree.parse('{"a": 1,}')
    except jsontree.ExpectedObjectKey as e:
        print(e.message)
"""

from .core.engine import load, loads, parse
from .core.values import (
    FALSE,
    NULL,
    TRUE,
    JSONArray,
    JSONFalse,
    JSONNull,
    JSONNumber,
    JSONObject,
    JSONString,
    JSONTrue,
    JSONValue,
    ValueKind,
    from_python,
)
from .security.exceptions import (
    ConversionError,
    ExpectedDigit,
    ExpectedEndOfInput,
    ExpectedEscapeChar,
    ExpectedObjectKey,
    ExpectedToken,
    ExpectedUnicodeEscape,
    JsonTreeError,
    ParseError,
    ParseErrorKind,
    SecurityError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .utils.config import ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "jsontree contributors"

__all__ = [
    # Parsing
    "parse", "loads", "load",
    # Value model
    "JSONValue", "JSONObject", "JSONArray", "JSONString", "JSONNumber",
    "JSONTrue", "JSONFalse", "JSONNull", "TRUE", "FALSE", "NULL",
    "ValueKind", "from_python",
    # Configuration classes
    "ParseConfig", "ParseLimits",
    # Exception classes
    "JsonTreeError", "ParseError", "ParseErrorKind", "SecurityError", "ConversionError",
    "UnexpectedEndOfInput", "ExpectedEndOfInput", "ExpectedObjectKey", "ExpectedToken",
    "UnexpectedToken", "ExpectedDigit", "ExpectedEscapeChar", "ExpectedUnicodeEscape",
]
