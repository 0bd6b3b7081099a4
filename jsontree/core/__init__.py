"""
jsontree Core Parsing Engine.

This module provides the value model, the cursor and the grammar.
"""

from .cursor import Cursor
from .engine import Parser, load, loads, parse
from .values import (
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

__all__ = [
    'parse', 'loads', 'load', 'Parser', 'Cursor',
    'JSONValue', 'JSONObject', 'JSONArray', 'JSONString', 'JSONNumber',
    'JSONTrue', 'JSONFalse', 'JSONNull', 'TRUE', 'FALSE', 'NULL',
    'ValueKind', 'from_python',
]
