"""Variable-length bit strings used as Huffman codes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Code:
    """A growable sequence of bits, most significant bit first."""

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[int] = ()) -> None:
        self._bits: list[int] = []
        for bit in bits:
            self.push(bit)

    def push(self, bit: int) -> None:
        """Append one bit (0 or 1) to the end of the code."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, not {bit!r}")
        self._bits.append(int(bit))

    def pop(self) -> int:
        """Remove and return the last bit; raise IndexError when empty."""
        if not self._bits:
            raise IndexError("pop from an empty code")
        return self._bits.pop()

    def copy(self) -> Code:
        """Return an independent copy of this code."""
        return Code(self._bits)

    def to_bytes(self) -> bytes:
        """Pack the bits into bytes, MSB first, padding the last byte with zeros."""
        out = bytearray((len(self._bits) + 7) // 8)
        for index, bit in enumerate(self._bits):
            if bit:
                out[index >> 3] |= 0x80 >> (index & 7)
        return bytes(out)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(tuple(self._bits))

    def __repr__(self) -> str:
        return f"Code('{''.join(map(str, self._bits))}')"