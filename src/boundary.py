"""
boundary.py — locate code-point boundaries inside UTF-8 bytes.

- A byte starts a code point unless its two high bits are `10` (continuation).
- `byte_index` maps a character offset to a byte offset with one forward scan.
- `count_chars` counts code-point starts over the whole buffer.

Input is assumed to be well-formed UTF-8. Nothing here validates it: orphan
continuation bytes or truncated sequences give offsets that may land inside a
code point.
"""
from __future__ import annotations

from typing import Union

import numpy as np

Buffer = Union[bytes, bytearray, memoryview]

CONTINUATION_MASK = 0xC0
CONTINUATION_TAG = 0x80


def is_char_start(byte: int) -> bool:
    """True for ASCII bytes and multi-byte lead bytes, False for continuation bytes."""
    return (byte & CONTINUATION_MASK) != CONTINUATION_TAG


def _as_bytes_view(buffer: Buffer) -> memoryview:
    # Flatten any buffer-protocol object to unsigned bytes.
    return memoryview(buffer).cast("B")


def byte_index(buffer: Buffer, char_index: int) -> int:
    """
    Return the byte offset at which character `char_index` begins.

    The check happens at each code-point start before the byte is consumed,
    so index 0 returns 0 without reading anything. An index at or past the
    character count never matches and the full byte length is returned.
    """
    if char_index < 0:
        raise ValueError(f"Character index {char_index} must be non-negative")

    view = _as_bytes_view(buffer)
    seen = 0
    for offset, byte in enumerate(view):
        if is_char_start(byte):
            if seen == char_index:
                return offset
            seen += 1
    return len(view)


def count_chars(buffer: Buffer) -> int:
    """Count code-point start bytes in a single pass over the buffer."""
    view = _as_bytes_view(buffer)
    if not len(view):
        return 0
    data = np.frombuffer(view, dtype=np.uint8)
    return int(np.count_nonzero((data & CONTINUATION_MASK) != CONTINUATION_TAG))


__all__ = [
    "Buffer",
    "is_char_start",
    "byte_index",
    "count_chars",
]
