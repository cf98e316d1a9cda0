"""JSON syntax tree: values, objects and arrays, with an indented text form."""

import copy
import enum
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

__all__ = ["ValueType", "Object", "Array", "Value", "format_value"]

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class ValueType(enum.Enum):
    """The JSON type held by a Value."""

    INT = enum.auto()
    FLOAT = enum.auto()
    BOOL = enum.auto()
    STRING = enum.auto()
    OBJECT = enum.auto()
    ARRAY = enum.auto()
    NIL = enum.auto()


class Object:
    """A JSON object: string keys mapped to values, iterated in key order."""

    def __init__(self, items: Any = None) -> None:
        self._members: dict[str, Value] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, (Mapping, Object)) else items
        for key, value in pairs:
            self[key] = value

    def __getitem__(self, key: str) -> "Value":
        return self._members[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"object keys must be strings, not {type(key).__name__}")
        self._members[key] = Value(value)

    def insert(self, key: str, value: Any) -> tuple["Value", bool]:
        """Add ``key`` if absent; return the stored value and whether it was added."""
        if key in self._members:
            return self._members[key], False
        self[key] = value
        return self._members[key], True

    def items(self) -> Iterator[tuple[str, "Value"]]:
        return iter(sorted(self._members.items(), key=lambda item: item[0]))

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return self._members == other._members

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Object({dict(self.items())!r})"

    def __str__(self) -> str:
        return format_value(self)


class Array:
    """A JSON array: an indexed sequence of values."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._elements: list[Value] = [Value(item) for item in (items or ())]

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"array indices must be integers, not {type(index).__name__}")
        if not 0 <= index < len(self._elements):
            raise IndexError("array index out of range")

    def __getitem__(self, index: int) -> "Value":
        self._check_index(index)
        return self._elements[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._elements[index] = Value(value)

    def append(self, value: Any) -> None:
        self._elements.append(Value(value))

    def __iter__(self) -> Iterator["Value"]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Array({self._elements!r})"

    def __str__(self) -> str:
        return format_value(self)


def _classify(value: Any) -> tuple[ValueType, Any]:
    if isinstance(value, Value):
        return value._type, copy.deepcopy(value._data)
    if value is None:
        return ValueType.NIL, None
    if isinstance(value, bool):
        return ValueType.BOOL, value
    if isinstance(value, int):
        if not _INT_MIN <= value <= _INT_MAX:
            raise OverflowError(f"integer {value} does not fit in 64 bits")
        return ValueType.INT, value
    if isinstance(value, float):
        return ValueType.FLOAT, value
    if isinstance(value, str):
        return ValueType.STRING, value
    if isinstance(value, Object):
        return ValueType.OBJECT, copy.deepcopy(value)
    if isinstance(value, Array):
        return ValueType.ARRAY, copy.deepcopy(value)
    if isinstance(value, Mapping):
        return ValueType.OBJECT, Object(value)
    if isinstance(value, (list, tuple)):
        return ValueType.ARRAY, Array(value)
    raise TypeError(f"cannot build a JSON value from {type(value).__name__}")


class Value:
    """A JSON value of any ValueType. Containers are copied on construction."""

    def __init__(self, value: Any = None) -> None:
        self._type, self._data = _classify(value)

    def type(self) -> ValueType:
        return self._type

    def _container_for(self, key: Any) -> Any:
        if isinstance(key, str):
            if self._type is not ValueType.OBJECT:
                raise TypeError("Value not an object")
        elif self._type is not ValueType.ARRAY:
            raise TypeError("Value not an array")
        return self._data

    def __getitem__(self, key: str | int) -> "Value":
        return self._container_for(key)[key]

    def __setitem__(self, key: str | int, value: Any) -> None:
        self._container_for(key)[key] = value

    def _expect(self, expected: ValueType) -> Any:
        if self._type is not expected:
            raise TypeError(f"Value is {self._type.name}, not {expected.name}")
        return self._data

    def as_int(self) -> int:
        return self._expect(ValueType.INT)

    def as_float(self) -> float:
        return self._expect(ValueType.FLOAT)

    def as_bool(self) -> bool:
        return self._expect(ValueType.BOOL)

    def as_string(self) -> str:
        return self._expect(ValueType.STRING)

    def as_object(self) -> Object:
        """Return the held object itself, so changes to it are visible here."""
        return self._expect(ValueType.OBJECT)

    def as_array(self) -> Array:
        """Return the held array itself, so changes to it are visible here."""
        return self._expect(ValueType.ARRAY)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._type is other._type and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Value({self._data!r})"

    def __str__(self) -> str:
        return format_value(self)


def _format_container(opening: str, closing: str, entries: list[str], depth: int) -> str:
    body = ",\n".join(entries)
    if body:
        body += "\n"
    return f"{opening}\n{body}{chr(9) * depth}{closing}"


def _format(item: Value | Object | Array, depth: int) -> str:
    inner = "\t" * (depth + 1)
    if isinstance(item, Object):
        entries = [f'{inner}"{key}": {_format(member, depth + 1)}' for key, member in item.items()]
        return _format_container("{", "}", entries, depth)
    if isinstance(item, Array):
        entries = [inner + _format(element, depth + 1) for element in item]
        return _format_container("[", "]", entries, depth)
    kind, data = item.type(), item._data
    if kind is ValueType.INT:
        return str(data)
    if kind is ValueType.FLOAT:
        return format(data, "g")
    if kind is ValueType.BOOL:
        return "true" if data else "false"
    if kind is ValueType.NIL:
        return "null"
    if kind is ValueType.STRING:
        return f'"{data}"'
    return _format(data, depth)


def format_value(value: Value | Object | Array) -> str:
    """Render a value as tab-indented text, one member or element per line."""
    return _format(value, 0)