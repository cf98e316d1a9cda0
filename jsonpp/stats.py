"""Counting of the values found in a JSON syntax tree."""

from dataclasses import dataclass
from typing import Any

from .value import Value, ValueType

__all__ = ["Stat", "generate_stat"]


@dataclass
class Stat:
    """Counts of values by kind; object keys count as strings."""

    object_count: int = 0
    array_count: int = 0
    number_count: int = 0
    string_count: int = 0
    true_count: int = 0
    false_count: int = 0
    null_count: int = 0
    member_count: int = 0
    element_count: int = 0
    string_length: int = 0


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def generate_stat(value: Any) -> Stat:
    """Walk a value tree and count its contents; string lengths are in UTF-8 bytes."""
    stat = Stat()
    pending = [value if isinstance(value, Value) else Value(value)]
    while pending:
        current = pending.pop()
        kind = current.type()
        if kind is ValueType.ARRAY:
            array = current.as_array()
            pending.extend(array)
            stat.array_count += 1
            stat.element_count += len(array)
        elif kind is ValueType.OBJECT:
            obj = current.as_object()
            for key, member in obj.items():
                pending.append(member)
                stat.string_length += _byte_length(key)
            stat.object_count += 1
            stat.member_count += len(obj)
            stat.string_count += len(obj)
        elif kind is ValueType.STRING:
            stat.string_count += 1
            stat.string_length += _byte_length(current.as_string())
        elif kind in (ValueType.INT, ValueType.FLOAT):
            stat.number_count += 1
        elif kind is ValueType.BOOL:
            if current.as_bool():
                stat.true_count += 1
            else:
                stat.false_count += 1
        else:
            stat.null_count += 1
    return stat