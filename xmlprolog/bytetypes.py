"""Classification of bytes in UTF-8 encoded input."""

from __future__ import annotations

import enum

__all__ = ["ByteType", "sequence_length", "utf8_byte_type"]


class ByteType(enum.Enum):
    """Role of a single byte within a UTF-8 sequence."""

    ASCII = "ascii"
    TRAIL = "trail"
    LEAD2 = "lead2"
    LEAD3 = "lead3"
    LEAD4 = "lead4"
    NONXML = "nonxml"
    MALFORM = "malform"


def _build_table() -> tuple[ByteType, ...]:
    spans = (
        (0x80, ByteType.ASCII),
        (0xC0, ByteType.TRAIL),
        (0xE0, ByteType.LEAD2),
        (0xF0, ByteType.LEAD3),
        (0xF5, ByteType.LEAD4),
        (0xFE, ByteType.NONXML),
        (0x100, ByteType.MALFORM),
    )
    table: list[ByteType] = []
    for stop, kind in spans:
        table.extend([kind] * (stop - len(table)))
    return tuple(table)


_TABLE = _build_table()

_LENGTHS = {
    ByteType.ASCII: 1,
    ByteType.LEAD2: 2,
    ByteType.LEAD3: 3,
    ByteType.LEAD4: 4,
}


def utf8_byte_type(byte: int) -> ByteType:
    """Return the type of ``byte`` (0-255) in UTF-8 input."""
    if not isinstance(byte, int) or not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte!r}")
    return _TABLE[byte]


def sequence_length(byte: int) -> int:
    """Return the length of the UTF-8 sequence that ``byte`` starts.

    Raises ValueError when ``byte`` cannot start a sequence.
    """
    kind = utf8_byte_type(byte)
    try:
        return _LENGTHS[kind]
    except KeyError:
        raise ValueError(f"byte 0x{byte:02X} ({kind.value}) cannot start a sequence") from None