# jsonpp

A small JSON syntax tree for Python, with no dependencies outside the
standard library.

## What is in it

### `jsonpp.value`

- `ValueType` — an enum of `INT`, `FLOAT`, `BOOL`, `STRING`, `OBJECT`,
  `ARRAY` and `NIL`.
- `Value(value=None)` — holds one JSON value and knows its type
  (`value.type()`). It can be built from `None`, `bool`, `int` (must fit in a
  signed 64-bit integer, else `OverflowError`), `float`, `str`, `Object`,
  `Array`, another `Value`, any mapping (becomes an `Object`) or a list or
  tuple (becomes an `Array`). Anything else raises `TypeError`. Containers
  and other values are copied when a `Value` is built from them.
  - `as_int()`, `as_float()`, `as_bool()`, `as_string()`, `as_object()`,
    `as_array()` return the held data and raise `TypeError` if the value is of
    another type. `as_object()` and `as_array()` return the held container
    itself, so changes to it show in the `Value`.
  - `value["key"]` works only on objects and `value[0]` only on arrays;
    otherwise `TypeError` ("Value not an object" / "Value not an array").
- `Object(items=None)` — string keys mapped to `Value`s. Assigning
  `obj[key] = x` wraps `x` in a `Value`; non-string keys raise `TypeError`;
  a missing key raises `KeyError`. `insert(key, value)` adds the key only if
  it is absent and returns `(stored_value, added)`. Iteration, `items()` and
  printing go in sorted key order.
- `Array(items=None)` — a sequence of `Value`s with `append`, `len`, iteration
  and indexing. Indices must be non-negative integers within range
  (`IndexError` otherwise; non-integers raise `TypeError`).
- `format_value(v)` — renders a `Value`, `Object` or `Array` as tab-indented
  text with one member or element per line; `str()` on any of them gives the
  same. Floats are written with Python's `"g"` format (six significant
  digits), and strings are written between quotes exactly as held, without
  escaping.

### `jsonpp.unescape`

`unescape(s)` replaces the escape sequences of a JSON string body (`\"`,
`\\`, `\/`, `\b`, `\f`, `\n`, `\t`, `\r`, `\uXXXX`) with the characters they
stand for. An unknown escape, a trailing backslash, or a `\u` not followed by
four characters starting with hex digits raises `UnescapeError` (a
`ValueError`).

### `jsonpp.utf8`

`code_point_to_utf8(code_point)` encodes a code point from 0 to 0xFFFF as one
to three UTF-8 bytes; surrogates are encoded as they are. Out-of-range values
raise `ValueError`.

### `jsonpp.stats`

`generate_stat(value)` walks a tree (a `Value`, or anything `Value` accepts)
and returns a `Stat` dataclass with `object_count`, `array_count`,
`number_count`, `string_count`, `true_count`, `false_count`, `null_count`,
`member_count`, `element_count` and `string_length`. Object keys count as
strings, and string lengths are measured in UTF-8 bytes.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Example

    from jsonpp.value import Array, Object, Value
    from jsonpp.stats import generate_stat

    obj = Object()
    obj["foo"] = True
    obj["bar"] = 3
    obj["baz"] = Object({"failure": True, "success": "no way"})

    beer = Array([True, "asia", "europa", 55, 3.12])
    obj["beer"] = beer

    print(obj)

    stat = generate_stat(Value(obj))
    print(stat.object_count, stat.array_count, stat.member_count)

## What it does not do

The package has no parser: it does not read JSON text or files into a tree.
Trees are built in code. Its only output is the indented text of
`format_value`, which does not escape strings, so it is not a general JSON
serialiser. There is no command-line tool.