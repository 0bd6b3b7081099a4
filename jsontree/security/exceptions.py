"""
Exception hierarchy and error reporting for jsontree.

Every grammar violation maps to one ``ParseErrorKind`` and one ``ParseError``
subclass, so callers can either catch a specific failure or inspect ``kind``.
Errors carry free-text diagnostics and an excerpt of the input near the
failure; they never carry line or column numbers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

import regex

# Literals people commonly type that are not JSON.
_PYTHON_LITERAL = regex.compile(r"(?:True|False|None)")
_NON_FINITE_LITERAL = regex.compile(r"-?(?:NaN|Infinity|inf|nan)")
_UNDEFINED_LITERAL = regex.compile(r"undefined")
_BARE_WORD = regex.compile(r"[A-Za-z_$][\w$]*")


class ParseErrorKind(Enum):
    """Failure kinds reported by the parser."""

    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"
    EXPECTED_END_OF_INPUT = "ExpectedEndOfInput"
    EXPECTED_OBJECT_KEY = "ExpectedObjectKey"
    EXPECTED_TOKEN = "ExpectedToken"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    EXPECTED_DIGIT = "ExpectedDigit"
    EXPECTED_ESCAPE_CHAR = "ExpectedEscapeChar"
    EXPECTED_UNICODE_ESCAPE = "ExpectedUnicodeEscape"


@dataclass
class ErrorContext:
    """Excerpt of the input surrounding an error."""

    excerpt: str
    error_char: str
    pointer: str


class JsonTreeError(Exception):
    """Base exception for all jsontree errors."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message

        if self.context and self.context.excerpt:
            msg += f"\n\nNear:\n  {self.context.excerpt}\n  {self.context.pointer}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"

        return msg


class ParseError(JsonTreeError):
    """
    Raised when the input is not valid JSON.

    Subclasses set ``kind``; ``ParseError.for_kind`` builds the subclass
    registered for a given kind.
    """

    kind: ClassVar[Optional[ParseErrorKind]] = None
    _registry: ClassVar[dict[ParseErrorKind, type["ParseError"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.kind is not None:
            ParseError._registry[cls.kind] = cls

    @classmethod
    def for_kind(
        cls,
        kind: ParseErrorKind,
        message: str,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ) -> "ParseError":
        """Create the ParseError subclass matching ``kind``."""
        return cls._registry[kind](message, context=context, suggestions=suggestions)


class UnexpectedEndOfInput(ParseError):
    """Input ended while more was required."""

    kind = ParseErrorKind.UNEXPECTED_END_OF_INPUT


class ExpectedEndOfInput(ParseError):
    """Non-whitespace input remained after the top-level value."""

    kind = ParseErrorKind.EXPECTED_END_OF_INPUT


class ExpectedObjectKey(ParseError):
    kind = ParseErrorKind.EXPECTED_OBJECT_KEY


class ExpectedToken(ParseError):
    """A required structural character (``,`` or ``:``) was missing."""

    kind = ParseErrorKind.EXPECTED_TOKEN


class UnexpectedToken(ParseError):
    """A character that cannot start any JSON value was found."""

    kind = ParseErrorKind.UNEXPECTED_TOKEN


class ExpectedDigit(ParseError):
    kind = ParseErrorKind.EXPECTED_DIGIT


class ExpectedEscapeChar(ParseError):
    kind = ParseErrorKind.EXPECTED_ESCAPE_CHAR


class ExpectedUnicodeEscape(ParseError):
    kind = ParseErrorKind.EXPECTED_UNICODE_ESCAPE


class SecurityError(JsonTreeError):
    """Raised when a resource limit is exceeded."""


class ConversionError(JsonTreeError, TypeError):
    """Raised when a value is narrowed to a variant it does not hold."""

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class ErrorSuggestionEngine:
    """Produces human-readable hints for common mistakes."""

    @staticmethod
    def suggest_for_unexpected_token(token: str) -> list[str]:
        """Suggestions for a character that cannot start a value."""
        if token == "'":
            return [
                "Strings and object keys must use double quotes",
                "Replace single quotes with double quotes",
            ]
        if token == ",":
            return ["Check for a missing value or a doubled comma"]
        if token and token in "}]":
            return [
                "Check for a trailing comma before the closing bracket",
                "Check for a missing value",
            ]
        if token and _BARE_WORD.fullmatch(token):
            suggestions = ErrorSuggestionEngine.suggest_for_invalid_value(token)
            if suggestions:
                return suggestions
            return ["Bare words are not allowed, wrap text values in double quotes"]
        return [
            "A value must be an object, array, string, number, true, false or null"
        ]

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        """Suggestions for an object, array or string left open."""
        closer = {"object": "}", "array": "]", "string": '"'}.get(structure_type, "")
        return [
            f"Add the closing '{closer}' to the {structure_type}",
            "Check that the input was not truncated",
        ]

    @staticmethod
    def suggest_for_invalid_value(value: str) -> list[str]:
        """Suggestions for a bare word that looks like a literal from another language."""
        if _PYTHON_LITERAL.fullmatch(value):
            return [
                "JSON literals are lowercase: use true, false or null",
            ]
        if _NON_FINITE_LITERAL.fullmatch(value):
            return [
                "NaN and Infinity are not valid JSON numbers",
                "Encode non-finite numbers as strings or null",
            ]
        if _UNDEFINED_LITERAL.fullmatch(value):
            return ["Use null instead of undefined"]
        return []

    @staticmethod
    def suggest_for_number(literal: str) -> list[str]:
        """Suggestions for a numeric literal missing its digits."""
        if literal.endswith("."):
            return ["Add at least one digit after the decimal point"]
        if literal[-1:] in ("e", "E", "+", "-") and len(literal) > 1:
            return ["An exponent needs at least one digit"]
        if literal == "-":
            return ["A minus sign must be followed by a digit"]
        return []


class ErrorReporter:
    """Builds errors that carry an excerpt of the original input."""

    def __init__(
        self,
        text: str,
        max_context: int = 40,
        include_context: bool = True,
        include_suggestions: bool = True,
    ):
        self.text = text
        self.max_context = max_context
        self.include_context = include_context
        self.include_suggestions = include_suggestions

    def build_context(self, offset: int) -> ErrorContext:
        """Cut an excerpt of at most ``max_context`` characters around ``offset``."""
        offset = min(max(offset, 0), len(self.text))
        half = self.max_context // 2
        start = max(0, offset - half)
        end = min(len(self.text), offset + half)
        # Keep the excerpt on one line.
        excerpt = self.text[start:end].replace("\n", " ").replace("\r", " ")
        excerpt = excerpt.replace("\t", " ")
        error_char = self.text[offset] if offset < len(self.text) else ""
        pointer = " " * (offset - start) + "^"
        return ErrorContext(excerpt=excerpt, error_char=error_char, pointer=pointer)

    def create_parse_error(
        self,
        kind: ParseErrorKind,
        message: str,
        offset: int,
        suggestions: Optional[list[str]] = None,
    ) -> ParseError:
        """Create the ParseError subclass for ``kind`` with context attached."""
        context = self.build_context(offset) if self.include_context else None
        if not self.include_suggestions:
            suggestions = None
        return ParseError.for_kind(kind, message, context=context, suggestions=suggestions)
