"""
Term buffer primitives shared by the normalizer and stemmer.

A word is held as a mutable list of single-codepoint strings plus a logical
length. Only positions [0, length) are meaningful; deletions shift the tail
left and return the new, shorter length without resizing the list.
"""

from typing import MutableSequence, Sequence


class BufferBoundsError(ValueError):
    """Logical length outside the buffer's capacity"""


def check_bounds(buffer: Sequence[str], length: int) -> None:
    """
    Validate that length addresses a real region of buffer.

    Raises:
        BufferBoundsError: If length < 0 or length > len(buffer)
    """
    if length < 0 or length > len(buffer):
        raise BufferBoundsError(
            f"Logical length {length} outside buffer of capacity {len(buffer)}"
        )


def starts_with(buffer: Sequence[str], length: int, prefix: str) -> bool:
    """True if buffer[0:length] starts with prefix"""
    n = len(prefix)
    if n > length:
        return False
    for i in range(n):
        if buffer[i] != prefix[i]:
            return False
    return True


def ends_with(buffer: Sequence[str], length: int, suffix: str) -> bool:
    """True if buffer[0:length] ends with suffix"""
    n = len(suffix)
    if n > length:
        return False
    offset = length - n
    for i in range(n):
        if buffer[offset + i] != suffix[i]:
            return False
    return True


def delete_n(buffer: MutableSequence[str], pos: int, length: int, n: int) -> int:
    """
    Delete n codepoints starting at pos.

    The tail [pos + n, length) is shifted left onto pos; slots past the new
    logical length keep stale values and must not be read.

    Returns:
        New logical length (length - n)
    """
    for i in range(pos, length - n):
        buffer[i] = buffer[i + n]
    return length - n


class TermBuffer:
    """
    Owned word buffer with its logical length.

    Bundling the two keeps the length within capacity for every pipeline
    stage; operations that shrink the word only move `length` down.
    """

    __slots__ = ("chars", "length")

    def __init__(self, text: str = ""):
        self.chars = list(text)
        self.length = len(self.chars)

    def set_text(self, text: str) -> None:
        self.chars = list(text)
        self.length = len(self.chars)

    @property
    def text(self) -> str:
        return "".join(self.chars[:self.length])

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"TermBuffer({self.text!r})"
