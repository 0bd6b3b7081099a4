"""
Recursive-descent parser for jsontree - turns JSON text into a value tree.
"""

import logging
from typing import Any, Callable, NoReturn, Optional, TextIO, Union

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
    ParseErrorKind,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig, ParseLimits
from .constants import (
    BARE_WORD,
    DIGIT_RUN,
    DIGITS,
    HEX_QUAD,
    HIGH_SURROGATES,
    JSON_ESCAPE_MAP,
    KEYWORDS,
    LOW_SURROGATES,
    REPLACEMENT_CHARACTER,
    STRING_CHUNK,
)
from .cursor import Cursor
from .values import (
    FALSE,
    NULL,
    TRUE,
    JSONArray,
    JSONNumber,
    JSONObject,
    JSONString,
    JSONValue,
)

logger = logging.getLogger(__name__)


class Parser:
    """
    JSON parser over a single input.

    Every production returns the parsed value when it matches, ``None`` when
    the input does not start with that production (so the next one is tried),
    and raises a ParseError subclass when the input starts like that
    production but is malformed. A Parser owns its cursor and is used for one
    parse only.
    """

    def __init__(
        self,
        text: str,
        config: Optional[ParseConfig] = None,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.config = config or ParseConfig()
        self.cursor = Cursor(text)
        self.validator = LimitValidator(self.config.limits or ParseLimits())
        self.error_reporter = error_reporter or ErrorReporter(
            text,
            self.config.max_error_context,
            include_context=self.config.include_context,
            include_suggestions=self.config.include_suggestions,
        )
        self._productions: tuple[Callable[[], Optional[JSONValue]], ...] = (
            self.parse_string,
            self.parse_number,
            self.parse_object,
            self.parse_array,
            lambda: self.parse_keyword("true", TRUE),
            lambda: self.parse_keyword("false", FALSE),
            lambda: self.parse_keyword("null", NULL),
        )

    def parse(self) -> JSONValue:
        """Parse one complete JSON document."""
        self.validator.validate_input_size(self.cursor.text)
        value = self.parse_value()

        if not self.config.allow_trailing_content:
            self.cursor.skip_whitespace()
            if not self.cursor.at_end():
                self._raise_parse_error(
                    ParseErrorKind.EXPECTED_END_OF_INPUT,
                    f"Expected end of input, found '{self.cursor.peek()}' "
                    "after the top-level value",
                    suggestions=[
                        "Remove the text after the top-level value",
                        "Wrap multiple values in an array",
                    ],
                )
        return value

    def parse_value(self) -> JSONValue:
        """Parse any JSON value, trying each production in a fixed order."""
        self.cursor.skip_whitespace()
        for production in self._productions:
            value = production()
            if value is not None:
                self.validator.count_item()
                return value

        self._raise_no_value()

    def parse_object(self) -> Optional[JSONObject]:
        """Parse a JSON object. Duplicate keys keep the last value."""
        if self.cursor.peek() != "{":
            return None

        self.cursor.advance()
        with self.validator.nested():
            members = self._object_members()
        return JSONObject(members)

    def _object_members(self) -> dict[str, JSONValue]:
        cursor = self.cursor
        members: dict[str, JSONValue] = {}

        while True:
            cursor.skip_whitespace()
            if cursor.at_end():
                self._raise_unclosed("object", "}")
            if cursor.peek() == "}":
                cursor.advance()
                return members

            if members:
                self._eat(",", "object")
                cursor.skip_whitespace()

            key = self.parse_string()
            if key is None:
                if cursor.at_end():
                    self._raise_unclosed("object", "}")
                self._raise_parse_error(
                    ParseErrorKind.EXPECTED_OBJECT_KEY,
                    "Expected an object key. Does the object have a trailing comma?",
                    suggestions=[
                        "Object keys must be double-quoted strings",
                        "Remove a trailing comma before '}'",
                    ],
                )

            cursor.skip_whitespace()
            self._eat(":", "object")
            members[key.value] = self.parse_value()
            self.validator.validate_members("object", len(members))

    def parse_array(self) -> Optional[JSONArray]:
        """Parse a JSON array, preserving element order."""
        if self.cursor.peek() != "[":
            return None

        self.cursor.advance()
        with self.validator.nested():
            items = self._array_items()
        return JSONArray(tuple(items))

    def _array_items(self) -> list[JSONValue]:
        cursor = self.cursor
        items: list[JSONValue] = []

        while True:
            cursor.skip_whitespace()
            if cursor.at_end():
                self._raise_unclosed("array", "]")
            if cursor.peek() == "]":
                cursor.advance()
                return items

            if items:
                self._eat(",", "array")

            items.append(self.parse_value())
            self.validator.validate_members("array", len(items))

    def parse_string(self) -> Optional[JSONString]:
        """Parse a double-quoted string, decoding escape sequences."""
        cursor = self.cursor
        if cursor.peek() != '"':
            return None

        start = cursor.pos
        cursor.advance()
        chunks: list[str] = []

        while True:
            chunk = cursor.match(STRING_CHUNK)
            if chunk is not None:
                chunks.append(chunk.group())
                cursor.advance(len(chunk.group()))

            if cursor.at_end():
                self._raise_unclosed("string", '"', offset=start)

            char = cursor.peek()
            cursor.advance()
            if char == '"':
                break
            chunks.append(self._parse_escape(start))

        value = "".join(chunks)
        self.validator.validate_string_length(len(value), cursor.slice(start, start + 20))
        return JSONString(value)

    def _parse_escape(self, string_start: int) -> str:
        """Decode the escape following a backslash."""
        cursor = self.cursor
        if cursor.at_end():
            self._raise_unclosed("string", '"', offset=string_start)

        char = cursor.peek()
        if char in JSON_ESCAPE_MAP:
            cursor.advance()
            return JSON_ESCAPE_MAP[char]

        if char == "u":
            cursor.advance()
            return self._parse_unicode_escape()

        self._raise_parse_error(
            ParseErrorKind.EXPECTED_ESCAPE_CHAR,
            f"Expected an escape sequence, found '\\{char}'",
            offset=cursor.pos - 1,
            suggestions=[
                'Valid escapes are \\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX',
                "Write a literal backslash as \\\\",
            ],
        )

    def _parse_unicode_escape(self) -> str:
        """Decode ``XXXX`` after ``\\u``, pairing surrogates when configured."""
        code = self._read_hex_quad()

        if code in HIGH_SURROGATES:
            if self.config.combine_surrogates:
                low = self._peek_low_surrogate()
                if low is not None:
                    self.cursor.advance(6)
                    return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
            return REPLACEMENT_CHARACTER

        if code in LOW_SURROGATES:
            return REPLACEMENT_CHARACTER

        return chr(code)

    def _read_hex_quad(self) -> int:
        cursor = self.cursor
        match = cursor.match(HEX_QUAD)
        if match is None:
            found = cursor.slice(cursor.pos, cursor.pos + 4)
            self._raise_parse_error(
                ParseErrorKind.EXPECTED_UNICODE_ESCAPE,
                f"Expected a unicode escape sequence, found '\\u{found}'",
                offset=cursor.pos - 2,
                suggestions=["\\u must be followed by exactly four hex digits"],
            )
        cursor.advance(4)
        return int(match.group(), 16)

    def _peek_low_surrogate(self) -> Optional[int]:
        """Return the low surrogate escaped next in the input, without consuming it."""
        cursor = self.cursor
        if not cursor.startswith("\\u"):
            return None
        match = cursor.match(HEX_QUAD, offset=2)
        if match is None:
            return None
        code = int(match.group(), 16)
        return code if code in LOW_SURROGATES else None

    def parse_number(self) -> Optional[JSONNumber]:
        """
        Parse a number: optional '-', digits, optional fraction, optional exponent.

        Each optional part that is started must be followed by at least one
        digit. The scanned literal is converted with float().
        """
        cursor = self.cursor
        first = cursor.peek()
        if not (first == "-" or (first != "" and first in DIGITS)):
            return None

        start = cursor.pos
        if first == "-":
            cursor.advance()
        self._expect_digits(start)

        if cursor.has_room() and cursor.peek() == ".":
            cursor.advance()
            self._expect_digits(start)

        if cursor.has_room() and (cursor.peek() == "e" or cursor.peek() == "E"):
            cursor.advance()
            if cursor.has_room() and (cursor.peek() == "+" or cursor.peek() == "-"):
                cursor.advance()
            self._expect_digits(start)

        literal = cursor.slice(start)
        self.validator.validate_number_length(literal)
        try:
            number = float(literal)
        except ValueError as e:
            self._raise_parse_error(
                ParseErrorKind.EXPECTED_DIGIT, f"'{literal}', {e}", offset=start
            )
        return JSONNumber(number)

    def _expect_digits(self, start: int) -> None:
        """Consume a run of ASCII digits, which must not be empty."""
        cursor = self.cursor
        match = cursor.match(DIGIT_RUN)
        if match is None:
            found = cursor.peek()
            received = f"'{found}'" if found else "end of input"
            numeric = cursor.slice(start)
            self._raise_parse_error(
                ParseErrorKind.EXPECTED_DIGIT,
                f"Expected a digit, received {received} after numeric '{numeric}'",
                suggestions=ErrorSuggestionEngine.suggest_for_number(numeric),
            )
        cursor.advance(len(match.group()))

    def parse_keyword(self, keyword: str, value: JSONValue) -> Optional[JSONValue]:
        """Match a literal keyword. What follows the keyword is not checked."""
        if not self.cursor.startswith(keyword):
            return None
        self.cursor.advance(len(keyword))
        return value

    def _eat(self, char: str, structure: str) -> None:
        """Consume a required structural character."""
        cursor = self.cursor
        if cursor.at_end():
            self._raise_unclosed(structure, char)
        if cursor.peek() != char:
            self._raise_parse_error(
                ParseErrorKind.EXPECTED_TOKEN,
                f"Expected '{char}', found '{cursor.peek()}'",
                suggestions=[f"Insert '{char}' here"],
            )
        cursor.advance()

    def _raise_no_value(self) -> NoReturn:
        """No production matched where a value was required."""
        cursor = self.cursor
        truncated = cursor.at_end() or any(
            cursor.remaining() < len(keyword)
            and keyword.startswith(cursor.slice(cursor.pos, len(cursor)))
            for keyword in KEYWORDS
        )
        if truncated:
            self._raise_parse_error(
                ParseErrorKind.UNEXPECTED_END_OF_INPUT,
                "Doesn't seem to be valid JSON: unexpected end of input, "
                "expected a value",
                suggestions=["Check that the input was not truncated"],
            )

        word = cursor.match(BARE_WORD)
        token = word.group() if word is not None else cursor.peek()
        self._raise_parse_error(
            ParseErrorKind.UNEXPECTED_TOKEN,
            f"Doesn't seem to be valid JSON: unexpected '{token}' "
            "where a value was expected",
            suggestions=ErrorSuggestionEngine.suggest_for_unexpected_token(token),
        )

    def _raise_unclosed(
        self, structure: str, expected: str, offset: Optional[int] = None
    ) -> NoReturn:
        self._raise_parse_error(
            ParseErrorKind.UNEXPECTED_END_OF_INPUT,
            f"Unexpected end of input. Expected '{expected}'",
            offset=offset,
            suggestions=ErrorSuggestionEngine.suggest_for_unclosed_structure(structure),
        )

    def _raise_parse_error(
        self,
        kind: ParseErrorKind,
        message: str,
        offset: Optional[int] = None,
        suggestions: Optional[list[str]] = None,
    ) -> NoReturn:
        if offset is None:
            offset = self.cursor.pos
        raise self.error_reporter.create_parse_error(kind, message, offset, suggestions)


def parse(
    text: Union[str, bytes, bytearray],
    allow_trailing_content: bool = False,
    combine_surrogates: bool = True,
    config: Optional[ParseConfig] = None,
) -> JSONValue:
    """
    Parse JSON text into an immutable value tree.

    Args:
        text: The JSON text; bytes are decoded as UTF-8
        allow_trailing_content: If True, ignore input after the top-level value
        combine_surrogates: If True, decode a \\uD8xx\\uDCxx pair as one character
        config: Optional ParseConfig; overrides the keyword options

    Returns:
        The parsed JSONValue

    Raises:
        ParseError: If the text is not valid JSON (a subclass names the failure)
        SecurityError: If a resource limit is exceeded
    """
    if config is None:
        config = ParseConfig(
            allow_trailing_content=allow_trailing_content,
            combine_surrogates=combine_surrogates,
        )

    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8")
    if not isinstance(text, str):
        raise TypeError(
            f"JSON input must be str, bytes or bytearray, not {type(text).__name__}"
        )

    logger.debug(f"Parsing {len(text)} characters")
    try:
        return Parser(text, config).parse()
    except ParseError as e:
        logger.debug(f"Parse failed with {e.kind.value}: {e.message}")
        raise


def loads(
    s: Union[str, bytes, bytearray], *, config: Optional[ParseConfig] = None
) -> Any:
    """
    Deserialize JSON text to plain Python objects.

    Objects become dicts, arrays lists, numbers floats, and true/false/null
    become True/False/None.
    """
    return parse(s, config=config).to_python()


def load(fp: TextIO, *, config: Optional[ParseConfig] = None) -> Any:
    """Deserialize JSON read from a file-like object to plain Python objects."""
    return loads(fp.read(), config=config)
