"""Mapping between character offsets and UTF-8 byte offsets."""

from itertools import accumulate
from typing import Sequence


def _utf8_width(ch: str) -> int:
    code = ord(ch)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if 0xDC80 <= code <= 0xDCFF:
        return 1  # surrogateescape stand-in for one undecodable input byte
    if code < 0x10000:
        return 3
    return 4


def utf8_offsets(text: str) -> Sequence[int]:
    """UTF-8 byte offset of every character boundary in ``text``.

    ``utf8_offsets(text)[i]`` is the byte offset of character offset ``i``;
    the sequence has ``len(text) + 1`` entries.
    """
    if text.isascii():
        return range(len(text) + 1)
    return list(accumulate((_utf8_width(ch) for ch in text), initial=0))
