"""
Common constants and compiled patterns used across the jsontree parser.
"""

import regex

# Single-character escapes and what they decode to. \u is handled separately.
JSON_ESCAPE_MAP = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

KEYWORDS = ("true", "false", "null")

DIGITS = "0123456789"

# ASCII whitespace only; Unicode spaces are not JSON whitespace.
WHITESPACE_RUN = regex.compile(r"[ \t\n\r]*")
DIGIT_RUN = regex.compile(r"[0-9]+")
HEX_QUAD = regex.compile(r"[0-9a-fA-F]{4}")
# Everything up to the next quote or backslash.
STRING_CHUNK = regex.compile(r'[^"\\]+')
BARE_WORD = regex.compile(r"[A-Za-z_$][\w$]*")

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)
REPLACEMENT_CHARACTER = "\ufffd"
