"""LZ77 block coder.

Repeated byte strings are replaced by (length, offset) references to an
earlier occurrence. A reference starts with a marker byte: the least common
byte value of the input, stored as the first byte of the output. A marker
byte that occurs in the data is written as the marker followed by a zero
byte. Lengths and offsets are written as big-endian groups of seven bits,
the high bit set on every byte except the last.

The worst case output size is ``(257/256) * len(data) + 1``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable

__all__ = ["MAX_OFFSET", "compress", "compress_fast", "decompress"]

MAX_OFFSET = 100_000
"""Most distant position the coder looks back to for a match."""

_UINT32 = 0xFFFFFFFF
_NO_INDEX = -1

_MatchFinder = Callable[[int, int], "tuple[int, int]"]


def _least_common_byte(data: bytes) -> int:
    """Return the least frequent byte value, the lowest one on ties."""
    counts = Counter(data)
    return min(range(256), key=lambda value: counts[value])


def _encode_varsize(value: int) -> bytes:
    """Encode an unsigned 32-bit value in one to five bytes."""
    if not 0 <= value <= _UINT32:
        raise ValueError(f"value out of range for a reference: {value}")
    probe = (value >> 3) & _UINT32
    num_bytes = 1
    for candidate in range(5, 1, -1):
        if probe & 0xFE000000:
            num_bytes = candidate
            break
        probe = (probe << 7) & _UINT32
    return bytes(
        ((value >> (shift * 7)) & 0x7F) | (0x80 if shift else 0)
        for shift in reversed(range(num_bytes))
    )


def _decode_varsize(data: bytes, pos: int) -> tuple[int, int]:
    """Read a variable-size value at ``pos``; return it and the next position."""
    value = 0
    while True:
        try:
            byte = data[pos]
        except IndexError:
            raise ValueError("compressed data ends inside a reference") from None
        pos += 1
        value = ((value << 7) | (byte & 0x7F)) & _UINT32
        if not byte & 0x80:
            return value, pos


def _match_length(data: bytes, here: int, there: int, start: int, limit: int) -> int:
    """Length of the common run at ``here`` and ``there``, from ``start`` up to ``limit``."""
    length = start
    while length < limit and data[here + length] == data[there + length]:
        length += 1
    return length


def _worth_coding(length: int, offset: int) -> bool:
    """Whether a reference is shorter than the literal bytes it replaces."""
    return (
        length >= 8
        or (length == 4 and offset <= 0x0000007F)
        or (length == 5 and offset <= 0x00003FFF)
        or (length == 6 and offset <= 0x001FFFFF)
        or (length == 7 and offset <= 0x0FFFFFFF)
    )


def _emit_literal(out: bytearray, symbol: int, marker: int) -> None:
    out.append(symbol)
    if symbol == marker:
        out.append(0)


def _encode(data: bytes, marker: int, find_match: _MatchFinder) -> bytes:
    out = bytearray([marker])
    inpos = 0
    bytesleft = len(data)
    while True:
        length, offset = find_match(inpos, bytesleft)
        if _worth_coding(length, offset):
            out.append(marker)
            out += _encode_varsize(length)
            out += _encode_varsize(offset)
            inpos += length
            bytesleft -= length
        else:
            _emit_literal(out, data[inpos], marker)
            inpos += 1
            bytesleft -= 1
        if bytesleft <= 3:
            break
    for symbol in data[inpos:]:
        _emit_literal(out, symbol, marker)
    return bytes(out)


def compress(data: bytes | bytearray | memoryview) -> bytes:
    """Compress ``data`` by searching the whole history window for each match.

    Slow, but needs no working memory beyond the output.
    """
    data = bytes(data)
    if not data:
        return b""

    def search_window(inpos: int, bytesleft: int) -> tuple[int, int]:
        best_length, best_offset = 3, 0
        for offset in range(3, min(inpos, MAX_OFFSET) + 1):
            if best_length >= bytesleft:
                break
            there = inpos - offset
            if (
                data[inpos] == data[there]
                and data[inpos + best_length] == data[there + best_length]
            ):
                length = _match_length(data, inpos, there, 0, min(bytesleft, offset))
                if length > best_length:
                    best_length, best_offset = length, offset
        return best_length, best_offset

    return _encode(data, _least_common_byte(data), search_window)


def compress_fast(data: bytes | bytearray | memoryview) -> bytes:
    """Compress ``data`` using a jump table of earlier byte pairs.

    Each position links to the nearest earlier position holding the same pair
    of bytes, so only real candidates are compared.
    """
    data = bytes(data)
    if not data:
        return b""

    jump = [_NO_INDEX] * len(data)
    last_seen: dict[tuple[int, int], int] = {}
    for index, pair in enumerate(zip(data, data[1:])):
        jump[index] = last_seen.get(pair, _NO_INDEX)
        last_seen[pair] = index

    def follow_chain(inpos: int, bytesleft: int) -> tuple[int, int]:
        best_length, best_offset = 3, 0
        index = jump[inpos]
        while index != _NO_INDEX and inpos - index < MAX_OFFSET:
            if best_length >= bytesleft:
                break
            if data[index + best_length] == data[inpos + best_length]:
                offset = inpos - index
                length = _match_length(data, inpos, index, 2, min(bytesleft, offset))
                if length > best_length:
                    best_length, best_offset = length, offset
            index = jump[index]
        return best_length, best_offset

    return _encode(data, _least_common_byte(data), follow_chain)


def decompress(data: bytes | bytearray | memoryview) -> bytes:
    """Restore the bytes that :func:`compress` or :func:`compress_fast` coded.

    Raises ValueError if the data is truncated or refers to bytes that were
    never produced.
    """
    data = bytes(data)
    if not data:
        return b""
    if len(data) == 1:
        raise ValueError("compressed data holds a marker but no content")

    marker = data[0]
    size = len(data)
    pos = 1
    out = bytearray()
    while pos < size:
        symbol = data[pos]
        pos += 1
        if symbol != marker:
            out.append(symbol)
            continue
        if pos >= size:
            raise ValueError("compressed data ends after a marker byte")
        if data[pos] == 0:
            out.append(marker)
            pos += 1
            continue
        length, pos = _decode_varsize(data, pos)
        offset, pos = _decode_varsize(data, pos)
        if offset == 0 or offset > len(out):
            raise ValueError(
                f"reference offset {offset} outside the {len(out)} bytes decoded so far"
            )
        start = len(out) - offset
        if length <= offset:
            out += out[start:start + length]
        else:
            for _ in range(length):
                out.append(out[-offset])
    return bytes(out)