"""Huffman decompression of byte strings and files."""

from __future__ import annotations

import io
import os
import struct
from typing import BinaryIO

from huffzip.priority import PriorityQueue, build_tree
from huffzip.tree import Node

_COUNT = struct.Struct("<H")
_ENTRY = struct.Struct("<BI")


class DecompressError(ValueError):
    """Raised when compressed data is malformed."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise DecompressError("Erro ao ler fila de prioridade.")
    return chunk


def read_header(stream: BinaryIO) -> PriorityQueue:
    """Read the symbol table and return it as a priority queue of leaves."""
    (count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size))
    if count == 0:
        raise DecompressError("Erro ao ler fila de prioridade.")
    queue = PriorityQueue()
    for _ in range(count):
        byte, frequency = _ENTRY.unpack(_read_exact(stream, _ENTRY.size))
        queue.insert(Node(byte, frequency))
    return queue


def decompress(data: bytes) -> bytes:
    """Decode data produced by compress.

    A tree holding a single symbol has no codes, so such input decodes to nothing.
    """
    stream = io.BytesIO(data)
    root = build_tree(read_header(stream))
    rest = stream.read()
    if not rest:
        raise DecompressError("missing valid-bit count")
    payload, valid_bits = rest[:-1], rest[-1]
    if valid_bits > 8:
        raise DecompressError(f"invalid valid-bit count: {valid_bits}")

    out = bytearray()
    node = root
    last = len(payload) - 1
    for index, byte in enumerate(payload):
        limit = valid_bits if index == last else 8
        for shift in range(7, 7 - limit, -1):
            child = node.right if (byte >> shift) & 1 else node.left
            if child is None:
                raise DecompressError("bit sequence leaves the code tree")
            node = child
            if node.is_leaf():
                out.append(node.byte)
                node = root
    return bytes(out)


def decompress_file(
    input_path: str | os.PathLike[str], output_path: str | os.PathLike[str]
) -> None:
    """Decompress the file at input_path into output_path."""
    with open(input_path, "rb") as source:
        data = source.read()
    plain = decompress(data)
    with open(output_path, "wb") as target:
        target.write(plain)