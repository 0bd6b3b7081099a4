"""
Configuration and limits for jsontree parsing.

Settings are grouped into small dataclasses. ParseLimits and ParseConfig accept
either the grouped objects or their individual fields as flat keyword
arguments, and expose every field as a flat attribute.
"""

from dataclasses import dataclass, fields
from typing import Any, Optional, TypeVar

GroupT = TypeVar("GroupT")


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100


@dataclass
class StructureLimits:
    """JSON structure complexity limits."""
    # Each level costs a few interpreter frames; keep well under the recursion limit.
    max_nesting_depth: int = 200
    max_object_keys: int = 10000
    max_array_items: int = 100000
    max_total_items: int = 1000000


@dataclass
class ParsingBehavior:
    """Core parsing behavior settings."""
    allow_trailing_content: bool = False
    combine_surrogates: bool = True


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    include_suggestions: bool = True
    max_error_context: int = 40


class _Delegate:
    """Flat attribute backed by a field of a nested settings group."""

    def __init__(self, group: str):
        self.group = group
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return getattr(getattr(instance, self.group), self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        setattr(getattr(instance, self.group), self.name, value)


def _option_names(*groups: type) -> set[str]:
    return {f.name for group in groups for f in fields(group)}


def _build_group(group: type[GroupT], given: Optional[GroupT], options: dict[str, Any]) -> GroupT:
    """Return ``given``, or a ``group`` built from the matching flat options."""
    if given is not None:
        return given
    names = _option_names(group)
    return group(**{key: value for key, value in options.items() if key in names})


def _reject_unknown(options: dict[str, Any], *groups: type) -> None:
    unknown = sorted(set(options) - _option_names(*groups))
    if unknown:
        raise TypeError(f"Unknown option(s): {', '.join(unknown)}")


@dataclass
class ParseLimits:
    """Resource limits for JSON parsing to prevent abuse."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    max_input_size = _Delegate("size_limits")
    max_string_length = _Delegate("size_limits")
    max_number_length = _Delegate("size_limits")
    max_nesting_depth = _Delegate("structure_limits")
    max_object_keys = _Delegate("structure_limits")
    max_array_items = _Delegate("structure_limits")
    max_total_items = _Delegate("structure_limits")

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_args: Any,
    ):
        _reject_unknown(flat_args, SizeLimits, StructureLimits)
        self.size_limits = _build_group(SizeLimits, size_limits, flat_args)
        self.structure_limits = _build_group(StructureLimits, structure_limits, flat_args)

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")


@dataclass
class ParseConfig:
    """
    Configuration options for jsontree parsing.

    Any field of SizeLimits, StructureLimits, ParsingBehavior or ErrorReporting
    may be passed as a keyword; grouped objects take precedence over keywords.
    """

    limits: Optional[ParseLimits] = None
    behavior: Optional[ParsingBehavior] = None
    error_reporting: Optional[ErrorReporting] = None

    allow_trailing_content = _Delegate("behavior")
    combine_surrogates = _Delegate("behavior")
    include_context = _Delegate("error_reporting")
    include_suggestions = _Delegate("error_reporting")
    max_error_context = _Delegate("error_reporting")

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        behavior: Optional[ParsingBehavior] = None,
        error_reporting: Optional[ErrorReporting] = None,
        **config_options: Any,
    ):
        _reject_unknown(
            config_options, SizeLimits, StructureLimits, ParsingBehavior, ErrorReporting
        )
        limit_options = {
            key: value
            for key, value in config_options.items()
            if key in _option_names(SizeLimits, StructureLimits)
        }
        self.limits = limits or ParseLimits(**limit_options)
        self.behavior = _build_group(ParsingBehavior, behavior, config_options)
        self.error_reporting = _build_group(ErrorReporting, error_reporting, config_options)
