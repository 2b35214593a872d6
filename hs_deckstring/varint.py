# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint encoding/decoding (unsigned LEB128, 64-bit).

Each byte carries 7 data bits, least significant group first; the high
bit is set when more bytes follow. Values are limited to 64 bits, so a
varint is at most 10 bytes long.
"""

from typing import BinaryIO, Callable, Iterable, List, Optional, Tuple

from .errors import DeckstringError, TruncatedStreamError, VarintOverflowError

MAX_UINT64 = (1 << 64) - 1
MAX_VARINT_LEN = 10


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned integer as a varint.

    Args:
        value: Non-negative integer to encode (at most 64 bits)

    Returns:
        Varint-encoded bytes

    Raises:
        ValueError: If value is negative
        VarintOverflowError: If value does not fit in 64 bits
    """
    if value < 0:
        raise ValueError("Cannot encode negative value as varint")
    if value > MAX_UINT64:
        raise VarintOverflowError(f"varint value too large: {value}")

    result = []
    while value >= 0x80:
        result.append((value & 0x7F) | 0x80)
        value >>= 7
    result.append(value)
    return bytes(result)


def _read_uvarint(next_byte: Callable[[], Optional[int]]) -> int:
    """Decode one varint, pulling bytes from next_byte until it returns None."""
    value = 0
    shift = 0

    for index in range(MAX_VARINT_LEN):
        byte = next_byte()
        if byte is None:
            raise TruncatedStreamError("unexpected end of data")

        if not (byte & 0x80):
            # The tenth byte may only contribute the 64th bit
            if index == MAX_VARINT_LEN - 1 and byte > 1:
                raise VarintOverflowError("varint overflows a 64-bit integer")
            return value | (byte << shift)

        value |= (byte & 0x7F) << shift
        shift += 7

    raise VarintOverflowError("varint overflows a 64-bit integer")


def decode_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        TruncatedStreamError: If data ends inside the varint
        VarintOverflowError: If the value does not fit in 64 bits
    """
    pos = offset

    def next_byte() -> Optional[int]:
        nonlocal pos
        if pos >= len(data):
            return None
        byte = data[pos]
        pos += 1
        return byte

    value = _read_uvarint(next_byte)
    return value, pos


class VarintReader:
    """
    Forward-only varint reader over a binary stream.

    Any object with a read(n) method returning bytes works, e.g.
    io.BytesIO or a file opened in binary mode.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    def _next_byte(self) -> Optional[int]:
        byte = self._stream.read(1)
        if not byte:
            return None
        return byte[0]

    def read_one(self) -> int:
        """
        Read exactly one varint.

        Returns:
            Decoded value

        Raises:
            TruncatedStreamError: If the stream ends inside the varint
            VarintOverflowError: If the value does not fit in 64 bits
        """
        return _read_uvarint(self._next_byte)

    def read_many(self, count: int) -> List[int]:
        """
        Read exactly count varints in sequence.

        Args:
            count: Number of varints to read

        Returns:
            List of decoded values

        Raises:
            DeckstringError: From the first failing element, with its
                index attribute set
        """
        values = []
        for index in range(count):
            try:
                values.append(self.read_one())
            except DeckstringError as e:
                e.index = index
                raise
        return values


class VarintWriter:
    """Varint writer over any binary stream with a write(bytes) method."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    def write_one(self, value: int) -> None:
        """Encode value and append it to the stream."""
        self._stream.write(encode_varint(value))

    def write_many(self, values: Iterable[int]) -> None:
        """Encode values in order and append them as one contiguous run."""
        self._stream.write(b"".join(encode_varint(v) for v in values))

    def flush(self) -> None:
        """Flush the underlying stream."""
        self._stream.flush()
