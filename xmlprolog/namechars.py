"""Classification of characters that may start or continue an XML name.

The tables cover the Basic Multilingual Plane; characters beyond it are
never name characters here.
"""

from __future__ import annotations

__all__ = ["is_name_char", "is_name_start_char", "is_valid_name"]

_EMPTY = "0"
_FULL = "F" * 64

# Each entry is the membership set of one 256-character block, written as a
# 256-bit integer whose bit n stands for the block's n-th code point.
_PAGE_BITS: tuple[int, ...] = tuple(
    int(page, 16)
    for page in (
        _EMPTY,
        _FULL,
        "FF7FFFFF_FF7FFFFF_00000000_00000000_07FFFFFE_87FFFFFE_04000000_00000000",
        "FC31FFFF_FFFFE00F_FFFFFFFF_FFFFFFFF_7FFFFFFF_FFFFFDFE_7FF3FFFF_FFFFFFFF",
        "00000000_00000003_F80001FF_FFFFFFFF_FFFFFFFF_FFFF0000_00000000_00FFFFFF",
        "000FFFFD_547F7FFF_FFFFFFFB_FFFFD740_00000000_00000000_00000000_00000000",
        "033FCFFF_FFFF199F_FFFFFFFF_FFFF0003_FFFFFFFF_DFFEFFFF_FFFFFFFF_FFFFDFFE",
        "000707FF_FFFF0000_00000000_0000007F_FFFFFFFE_027FFFFF_FFFE0000_00000000",
        "00000060_002F7FFF_7CFFFFFF_FFFFFFFF_FFFE0000_000007FE_07FFFFFE_00000000",
        "00030003_B0000000_03C5FDFF_FFF99FE0_00000003_FF000000_23FFFFFF_FFFFFFE0",
        "00000001_00000000_23EDFDFF_FFFBAFE0_001C0000_5E000000_036DFDFF_FFF987E0",
        "00000000_00000000_03BFC718_D63DC7E0_00000003_B0000000_23CDFDFF_FFF99FE0",
        "00000003_40000000_03EFFDFF_FFFDDFE0_00000003_00000000_03EFFDFF_FFFDDFE0",
        "00000003_00000000_03FFFDFF_FFFDDFE0",
        "00000000_0000001F_200D6CAE_FEF02596_00000000_0000003F_000D7FFF_FFFFFFFE",
        "000003FF_FFFFFEFF_00000000_00000000",
        "007FFFFF_FFFF003F_FFFFFFFF_00000000_00000000_00000000_00000000_00000000",
        "02010800_00000007_F580C900_40000000_002C62AB_82315001_50000000_0007DAED",
        "03FFFFFF_FFFFFFFF_FFFFFFFF_0FFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF",
        "1FDC1FFF_0FCF1FDC_5FDFFFFF_FFFFFFFF_3FFFFFFF_AAFF3F3F_FFFFFFFF_3F3FFFFF",
        "00000007_00000000_00000000_00004C40_00000000",
        "07FFFFFF_FFFFFFFF_FFFFFFFE_001FFFFF_FFFFFFFF_FFFFFFFE_000003FE_00000080",
        "00001FFF_FFFFFFE0",
        "0000003F_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF",
        "0000000F_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF",
        "FF7FFFFF_FF7FFFFF_00800000_00000000_07FFFFFE_87FFFFFE_07FF6000_00000000",
        "00000000_00030003_F80001FF_FFFFFFFF_FFFFFFFF_FFFF0000_00000000_00FFFFFF",
        "000FFFFD_547F7FFF_FFFFFFFB_FFFFD7C0_00000003_0000003F_FFFFFFFF_FFFFFFFF",
        "033FCFFF_FFFF199F_FFFFFFFF_FFFF007B_FFFFFFFF_DFFEFFFF_FFFFFFFF_FFFFDFFE",
        "000707FF_FFFF0016_BBFFFFFB_FFFE007F_FFFFFFFE_027FFFFF_FFFE0000_00000000",
        "03FF3DFF_FFEF7FFF_7CFFFFFF_FFFFFFFF_FFFF03FF_0007FFFF_07FFFFFE_00000000",
        "0003FFCF_B080399F_D3C5FDFF_FFF99FEE_0000FFCF_FF1E3FFF_F3FFFFFF_FFFFFFEE",
        "0000FFC1_00003BBF_F3EDFDFF_FFFBAFEE_001FFFC0_5E003987_D36DFDFF_FFF987E4",
        "0000FF80_00803DC7_C3BFC718_D63DC7EC_0000FFC3_B0C0398F_F3CDFDFF_FFF99FEE",
        "0000FFC3_40603DDF_C3EFFDFF_FFFDDFEC_0000FFC3_00603DDF_C3EFFDFF_FFFDDFEE",
        "0000FFC3_00803DCF_C3FFFDFF_FFFDDFEC",
        "00000000_03FF3F5F_3BFF6CAE_FEF02596_00000000_03FF7FFF_07FF7FFF_FFFFFFFE",
        "02FE3FFF_FEBF0FDF_FFFE03FF_FFFFFEFF_C2A003FF_03000000",
        "00000002_1FFF0000_00000000_00000000_00000000_00000000_00000000_00000000",
        "77FFFFFF_FFFFFFFF_FFFFFFFE_661FFFFF_FFFFFFFF_FFFFFFFE_003EFFFE_000000A0",
    )
)

_FULL_PAGE = 1


def _page_index(head: dict[int, int]) -> bytes:
    """Build the block-to-page table from the entries below block 0x40."""
    table = bytearray(256)
    for block, page in head.items():
        table[block] = page
    # Ideographic and Hangul ranges shared by both tables.
    table[0x4E:0x9F] = bytes([_FULL_PAGE]) * (0x9F - 0x4E)
    table[0x9F] = 0x17
    table[0xAC:0xD7] = bytes([_FULL_PAGE]) * (0xD7 - 0xAC)
    table[0xD7] = 0x18
    return bytes(table)


_SHARED_HEAD = {
    0x10: 0x10,
    0x11: 0x11,
    0x1E: 0x12,
    0x1F: 0x13,
    0x21: 0x14,
    0x31: 0x16,
}

_NMSTRT_PAGES = _page_index(
    {
        **{block: block + 2 for block in range(0x00, 0x07)},
        **{block: block for block in range(0x09, 0x10)},
        **_SHARED_HEAD,
        0x30: 0x15,
    }
)

_NAME_PAGES = _page_index(
    {
        0x00: 0x19,
        0x01: 0x03,
        **{block: block + 0x18 for block in range(0x02, 0x07)},
        **{block: block + 0x16 for block in range(0x09, 0x10)},
        **_SHARED_HEAD,
        0x20: 0x26,
        0x30: 0x27,
    }
)


def _code_point(char: str) -> int:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def _lookup(pages: bytes, code: int) -> bool:
    if code > 0xFFFF:
        return False
    bits = _PAGE_BITS[pages[code >> 8]]
    return bool((bits >> (code & 0xFF)) & 1)


def is_name_start_char(char: str) -> bool:
    """Return whether ``char`` may begin an XML name."""
    return _lookup(_NMSTRT_PAGES, _code_point(char))


def is_name_char(char: str) -> bool:
    """Return whether ``char`` may appear inside an XML name."""
    return _lookup(_NAME_PAGES, _code_point(char))


def is_valid_name(text: str) -> bool:
    """Return whether ``text`` is a non-empty well-formed XML name."""
    if not text:
        return False
    first, rest = text[0], text[1:]
    return is_name_start_char(first) and all(is_name_char(c) for c in rest)