"""Resolution of backslash escapes in JSON string literals."""

import re

from .utf8 import code_point_to_utf8

__all__ = ["UnescapeError", "unescape"]


class UnescapeError(ValueError):
    """Raised when a string holds an escape sequence that cannot be resolved."""


_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

_ESCAPE = re.compile(r"\\(?:u(.{0,4})|(.)|$)", re.DOTALL)
_HEX_PREFIX = re.compile(r"\s*([0-9A-Fa-f]+)")


def _decode_code_point(digits: str, source: str) -> str:
    if len(digits) < 4:
        raise UnescapeError(f"Truncated unicode escape in {source}")
    match = _HEX_PREFIX.match(digits)
    if match is None:
        raise UnescapeError(f"Invalid unicode escape in {source}")
    code_point = int(match.group(1), 16)
    return code_point_to_utf8(code_point).decode("utf-8", "surrogatepass")


def unescape(s: str) -> str:
    """Return ``s`` with every JSON escape sequence replaced by its character."""

    def replace(match: re.Match) -> str:
        digits, other = match.group(1), match.group(2)
        if digits is not None:
            return _decode_code_point(digits, s)
        if other is not None and other in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[other]
        raise UnescapeError("Unexpected escape character in " + s)

    return _ESCAPE.sub(replace, s)