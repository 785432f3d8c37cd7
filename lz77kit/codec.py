"""LZ77 sliding-window compression with fixed-size (offset, length, byte) records."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

# Each record is a 32-bit offset, a 32-bit length and one literal byte.
_RECORD = struct.Struct("<iiB")


@dataclass(frozen=True)
class Match:
    """A back-reference into the window followed by one literal byte."""

    offset: int
    length: int
    next_byte: int


class LZ77:
    """Encoder and decoder parameterised by window and lookahead sizes."""

    def __init__(self, window_size: int, lookahead_buffer_size: int) -> None:
        self.window_size = window_size
        self.lookahead_buffer_size = lookahead_buffer_size

    def find_longest_match(self, data: bytes, position: int) -> Match:
        """Find the longest match for ``data[position:]`` inside the window.

        Earlier window positions win ties. When a match runs to the end of
        the data, the literal byte keeps the value of the previous best
        candidate (initially the byte at ``position``).
        """
        size = len(data)
        best_offset = 0
        best_length = 0
        next_byte = data[position]

        for start in range(max(0, position - self.window_size), position):
            length = 0
            while (
                length < self.lookahead_buffer_size
                and position + length < size
                and data[start + length] == data[position + length]
            ):
                length += 1
            if length > best_length:
                best_length = length
                best_offset = position - start
                if position + length < size:
                    next_byte = data[position + length]

        return Match(best_offset, best_length, next_byte)

    def encode(self, data: bytes) -> bytes:
        """Encode ``data`` into a stream of packed records."""
        data = bytes(data)
        out = bytearray()
        position = 0
        while position < len(data):
            match = self.find_longest_match(data, position)
            out += _RECORD.pack(match.offset, match.length, match.next_byte)
            position += match.length + 1
        return bytes(out)

    def decode(self, data: bytes) -> bytes:
        """Decode a record stream produced by :meth:`encode`.

        Raises ValueError for a truncated stream or a reference that points
        outside the data decoded so far.
        """
        data = bytes(data)
        if len(data) % _RECORD.size:
            raise ValueError(
                f"truncated record stream: {len(data)} bytes is not a multiple "
                f"of {_RECORD.size}"
            )

        out = bytearray()
        for offset, length, next_byte in _RECORD.iter_unpack(data):
            if length < 0:
                raise ValueError(f"negative match length {length}")
            if length and not 0 < offset <= len(out):
                raise ValueError(
                    f"offset {offset} out of range for {len(out)} decoded bytes"
                )
            for _ in range(length):
                out.append(out[-offset])
            out.append(next_byte)
        return bytes(out)

    def compress(self, input_path: PathLike, output_path: PathLike) -> None:
        """Compress the file at ``input_path`` into ``output_path``."""
        data = Path(input_path).read_bytes()
        Path(output_path).write_bytes(self.encode(data))

    def decompress(self, input_path: PathLike, output_path: PathLike) -> None:
        """Decompress the file at ``input_path`` into ``output_path``."""
        data = Path(input_path).read_bytes()
        Path(output_path).write_bytes(self.decode(data))