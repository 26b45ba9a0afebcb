"""Byte frequency counting."""

from __future__ import annotations

import os
from collections.abc import Iterable

from huffzip.tree import Node


class FrequencyTable:
    """Counts how many times each byte value occurs."""

    def __init__(self) -> None:
        self._counts: dict[int, int] = {}

    def add(self, byte: int) -> None:
        """Count one occurrence of a byte value."""
        if not 0 <= byte <= 255:
            raise ValueError(f"byte value out of range: {byte!r}")
        self._counts[byte] = self._counts.get(byte, 0) + 1

    def update(self, data: Iterable[int]) -> None:
        """Count every byte of data."""
        for byte in data:
            self.add(byte)

    def nodes(self) -> list[Node]:
        """Return a leaf node for each byte seen, in ascending byte order."""
        return [Node(byte, self._counts[byte]) for byte in sorted(self._counts)]

    def __len__(self) -> int:
        return len(self._counts)


def count_frequencies(path: str | os.PathLike[str]) -> FrequencyTable:
    """Count the byte frequencies of a file."""
    table = FrequencyTable()
    with open(path, "rb") as stream:
        for chunk in iter(lambda: stream.read(65536), b""):
            table.update(chunk)
    return table