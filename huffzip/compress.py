"""Huffman compression of byte strings and files."""

from __future__ import annotations

import io
import os
import struct
from typing import BinaryIO

from huffzip.frequency import FrequencyTable
from huffzip.priority import PriorityQueue, build_tree
from huffzip.tree import generate_codes

_COUNT = struct.Struct("<H")
_ENTRY = struct.Struct("<BI")


def write_header(stream: BinaryIO, queue: PriorityQueue) -> None:
    """Write the symbol count and each (byte, frequency) pair in queue order."""
    stream.write(_COUNT.pack(len(queue)))
    for node in queue:
        stream.write(_ENTRY.pack(node.byte, node.frequency & 0xFFFFFFFF))


def compress(data: bytes) -> bytes:
    """Compress data; the result is header, packed code bits, then a valid-bit count."""
    table = FrequencyTable()
    table.update(data)
    if not len(table):
        raise ValueError("cannot compress empty input")

    codes = generate_codes(build_tree(PriorityQueue.from_table(table)))
    code_strings = {byte: "".join(map(str, code)) for byte, code in codes.items()}

    out = io.BytesIO()
    write_header(out, PriorityQueue.from_table(table))

    bits = "".join(code_strings[byte] for byte in data)
    remainder = len(bits) % 8
    if remainder:
        bits += "0" * (8 - remainder)
    if bits:
        out.write(int(bits, 2).to_bytes(len(bits) // 8, "big"))
    out.write(bytes([remainder or 8]))
    return out.getvalue()


def compress_file(
    input_path: str | os.PathLike[str], output_path: str | os.PathLike[str]
) -> None:
    """Compress the file at input_path into output_path."""
    with open(input_path, "rb") as source:
        data = source.read()
    packed = compress(data)
    with open(output_path, "wb") as target:
        target.write(packed)