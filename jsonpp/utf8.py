"""Encoding of 16-bit code points as UTF-8 bytes."""

__all__ = ["code_point_to_utf8"]


def code_point_to_utf8(code_point: int) -> bytes:
    """Encode a code point in the range 0..0xFFFF as one to three UTF-8 bytes.

    Surrogate code points are encoded as they are, without pairing.
    """
    if not 0 <= code_point <= 0xFFFF:
        raise ValueError(f"code point out of 16-bit range: {code_point:#x}")
    if code_point <= 0x7F:
        return bytes([code_point])
    if code_point <= 0x7FF:
        return bytes([0xC0 | (code_point >> 6), 0x80 | (code_point & 0x3F)])
    return bytes(
        [
            0xE0 | (code_point >> 12),
            0x80 | ((code_point >> 6) & 0x3F),
            0x80 | (code_point & 0x3F),
        ]
    )