"""
jsontree error taxonomy and resource limits.
"""

from .exceptions import (
    ConversionError,
    ErrorContext,
    ErrorReporter,
    ErrorSuggestionEngine,
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
from .limits import LimitValidator

__all__ = [
    'JsonTreeError', 'ParseError', 'ParseErrorKind', 'SecurityError', 'ConversionError',
    'UnexpectedEndOfInput', 'ExpectedEndOfInput', 'ExpectedObjectKey', 'ExpectedToken',
    'UnexpectedToken', 'ExpectedDigit', 'ExpectedEscapeChar', 'ExpectedUnicodeEscape',
    'ErrorContext', 'ErrorReporter', 'ErrorSuggestionEngine', 'LimitValidator',
]
