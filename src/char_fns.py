"""Character-indexed length, split and replace over UTF-8 buffers."""
from __future__ import annotations

from typing import Tuple

from boundary import Buffer, byte_index, count_chars


class CharIndexError(ValueError):
    """Raised by the strict variants when a character range runs past the text."""

    def __init__(self, index: int, length: int, char_count: int) -> None:
        self.index = index
        self.length = length
        self.char_count = char_count
        if length:
            msg = f"Character range [{index}, {index + length}) out of bounds (0-{char_count})"
        else:
            msg = f"Character index {index} out of bounds (0-{char_count})"
        super().__init__(msg)


def _sliceable(buffer: Buffer) -> Buffer:
    if isinstance(buffer, memoryview):
        return buffer.cast("B")
    return buffer


def char_len(buffer: Buffer) -> int:
    """Return the number of code points in the buffer."""
    return count_chars(buffer)


def char_split(buffer: Buffer, index: int, *, strict: bool = False) -> Tuple[Buffer, Buffer]:
    """
    Split the buffer at character offset `index`.

    The halves are slices of the caller's object: `bytes` in, `bytes` out;
    `memoryview` in, borrowed views out. `before + after` is always the
    original buffer. An index past the end clamps to an empty `after` unless
    `strict` is set, in which case CharIndexError is raised.
    """
    if strict:
        total = char_len(buffer)
        if index > total:
            raise CharIndexError(index, 0, total)
    data = _sliceable(buffer)
    offset = byte_index(data, index)
    return data[:offset], data[offset:]


def char_replace(
    buffer: Buffer,
    index: int,
    length: int,
    replacement: Buffer,
    *,
    strict: bool = False,
) -> bytes:
    """
    Replace characters [index, index + length) with `replacement`.

    `replacement` is copied byte for byte. A zero `length` inserts, an empty
    `replacement` deletes, and a range running past the end is cut at the end
    of the buffer. With `strict`, any range not fully inside the text raises
    CharIndexError.
    """
    if length < 0:
        raise ValueError(f"Character length {length} must be non-negative")
    if strict:
        total = char_len(buffer)
        if index > total or index + length > total:
            raise CharIndexError(index, length, total)

    pre, remaining = char_split(buffer, index)
    _, post = char_split(remaining, length)
    return b"".join((pre, replacement, post))


__all__ = [
    "CharIndexError",
    "char_len",
    "char_split",
    "char_replace",
]
