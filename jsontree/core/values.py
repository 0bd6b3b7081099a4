"""
Immutable value tree produced by the parser.

Each JSON value is one of seven frozen variants. Narrowing methods such as
``as_object()`` extract the concrete payload and raise ``ConversionError``
when the variant does not match.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Union

from ..security.exceptions import ConversionError


class ValueKind(Enum):
    """The variant held by a JSONValue."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


class JSONValue:
    """Base class for every parsed JSON value."""

    __slots__ = ()

    kind: ValueKind

    def _mismatch(self, expected: str) -> ConversionError:
        return ConversionError(
            f"Invalid type conversion: expected {expected}, found {self.kind.value}",
            expected=expected,
            actual=self.kind,
        )

    def as_object(self) -> Mapping[str, "JSONValue"]:
        """Return the members of an object."""
        raise self._mismatch("object")

    def as_array(self) -> tuple["JSONValue", ...]:
        """Return the items of an array."""
        raise self._mismatch("array")

    def as_string(self) -> str:
        raise self._mismatch("string")

    def as_number(self) -> float:
        raise self._mismatch("number")

    def as_bool(self) -> bool:
        """Return True or False for the two boolean markers."""
        raise self._mismatch("boolean")

    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def to_python(self) -> Any:
        """Convert the tree to plain dicts, lists, strings, floats, bools and None."""
        raise NotImplementedError


@dataclass(frozen=True)
class JSONObject(JSONValue):
    """Mapping from unique string keys to values. Key order is not significant."""

    members: Mapping[str, JSONValue] = field(default_factory=dict)
    kind = ValueKind.OBJECT

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONObject):
            return NotImplemented
        return dict(self.members) == dict(other.members)

    def as_object(self) -> Mapping[str, JSONValue]:
        return self.members

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.members.items()}


@dataclass(frozen=True)
class JSONArray(JSONValue):
    """Ordered sequence of values."""

    items: tuple[JSONValue, ...] = ()
    kind = ValueKind.ARRAY

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def as_array(self) -> tuple[JSONValue, ...]:
        return self.items

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class JSONString(JSONValue):
    value: str
    kind = ValueKind.STRING

    def as_string(self) -> str:
        return self.value

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JSONNumber(JSONValue):
    """A double-precision number; integers beyond 2**53 lose precision."""

    value: float
    kind = ValueKind.NUMBER

    def as_number(self) -> float:
        return self.value

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class JSONTrue(JSONValue):
    kind = ValueKind.TRUE

    def as_bool(self) -> bool:
        return True

    def to_python(self) -> bool:
        return True


@dataclass(frozen=True)
class JSONFalse(JSONValue):
    kind = ValueKind.FALSE

    def as_bool(self) -> bool:
        return False

    def to_python(self) -> bool:
        return False


@dataclass(frozen=True)
class JSONNull(JSONValue):
    kind = ValueKind.NULL

    def to_python(self) -> None:
        return None


TRUE = JSONTrue()
FALSE = JSONFalse()
NULL = JSONNull()

PythonValue = Union[dict, list, tuple, str, int, float, bool, None]


def from_python(obj: PythonValue) -> JSONValue:
    """Build a value tree from native Python data."""
    # bool before int: bool is an int subclass.
    if obj is None:
        return NULL
    if obj is True:
        return TRUE
    if obj is False:
        return FALSE
    if isinstance(obj, JSONValue):
        return obj
    if isinstance(obj, str):
        return JSONString(obj)
    if isinstance(obj, (int, float)):
        return JSONNumber(float(obj))
    if isinstance(obj, Mapping):
        members = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise ConversionError(
                    f"Object keys must be strings, got {type(key).__name__}"
                )
            members[key] = from_python(value)
        return JSONObject(members)
    if isinstance(obj, (list, tuple)):
        return JSONArray(tuple(from_python(item) for item in obj))
    raise ConversionError(f"Cannot convert {type(obj).__name__} to a JSON value")


_NARROWERS = {
    ValueKind.OBJECT: "as_object",
    ValueKind.ARRAY: "as_array",
    ValueKind.STRING: "as_string",
    ValueKind.NUMBER: "as_number",
    ValueKind.TRUE: "as_bool",
    ValueKind.FALSE: "as_bool",
}


def unwrap(value: JSONValue, kind: ValueKind) -> Any:
    """
    Narrow ``value`` to ``kind`` where the shape is already guaranteed.

    Only for call sites that have proven the shape beforehand (tests, or data
    this process built itself). A mismatch is a programming error and raises
    AssertionError instead of ConversionError; never call this on untrusted
    input, use the ``as_*`` methods and handle ConversionError instead.
    """
    if value.kind is not kind:
        raise AssertionError(f"Tried to unwrap {value.kind.value} as {kind.value}")
    if kind is ValueKind.NULL:
        return None
    return getattr(value, _NARROWERS[kind])()
