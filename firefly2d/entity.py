"""Stable 64-bit names for engine entities."""

from __future__ import annotations

__all__ = ["MAX_NAME_LENGTH", "decode_name"]

_FNV_OFFSET_BASIS = 14695981039346656037
_FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1

MAX_NAME_LENGTH = 100
"""Names this long or longer are not hashed and decode to 0."""


def decode_name(name: str | bytes) -> int:
    """Hash a name into a 64-bit entity name with FNV-1a.

    The name ends at its first NUL character. An empty name, or one of
    ``MAX_NAME_LENGTH`` bytes or more, decodes to 0. Bytes above 0x7F are
    mixed in sign-extended, as a signed ``char`` would be.
    """
    data = name.encode("utf-8") if isinstance(name, str) else bytes(name)
    data = data.split(b"\0", 1)[0]
    if not data or len(data) >= MAX_NAME_LENGTH:
        return 0

    value = _FNV_OFFSET_BASIS
    for byte in data:
        value ^= byte if byte < 0x80 else (byte - 0x100) & _MASK64
        value = (value * _FNV_PRIME) & _MASK64
    return value