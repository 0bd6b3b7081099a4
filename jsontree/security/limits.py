"""
Resource limits for jsontree.

A LimitValidator is owned by one Parser and checks the configured ParseLimits
as the document is read, so oversized or deeply nested input fails with a
SecurityError before it can exhaust memory or the interpreter stack.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from ..utils.config import ParseLimits
from .exceptions import SecurityError


class LimitValidator:
    """Enforces ParseLimits while a single document is parsed."""

    def __init__(self, limits: ParseLimits):
        self.limits = limits
        self.nesting_depth = 0
        self.total_items = 0

    @staticmethod
    def _check(quantity: str, actual: int, limit: int, near: Optional[str] = None) -> None:
        if actual <= limit:
            return
        location = f" near '{near}'" if near else ""
        raise SecurityError(f"{quantity} {actual} exceeds limit {limit}{location}")

    def validate_input_size(self, text: str) -> None:
        self._check("Input size", len(text), self.limits.max_input_size)

    def validate_string_length(self, length: int, excerpt: Optional[str] = None) -> None:
        """Check a decoded string; ``excerpt`` locates it in the message."""
        self._check("String length", length, self.limits.max_string_length, excerpt)

    def validate_number_length(self, literal: str) -> None:
        self._check("Number length", len(literal), self.limits.max_number_length, literal[:20])

    @contextmanager
    def nested(self) -> Iterator[None]:
        """
        Count one level of object or array nesting for the duration of the block.

        The depth is restored on exit even when parsing inside the block fails.
        """
        self.nesting_depth += 1
        try:
            self._check("Nesting depth", self.nesting_depth, self.limits.max_nesting_depth)
            yield
        finally:
            self.nesting_depth -= 1

    def validate_members(self, structure: str, count: int) -> None:
        """Check the number of members collected so far in an object or array."""
        if structure == "object":
            self._check("Object key count", count, self.limits.max_object_keys)
        else:
            self._check("Array item count", count, self.limits.max_array_items)

    def count_item(self) -> None:
        """Record one more parsed value of any kind."""
        self.total_items += 1
        self._check("Total item count", self.total_items, self.limits.max_total_items)
