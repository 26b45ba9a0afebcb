"""Huffman tree nodes and code-table generation."""

from __future__ import annotations

from dataclasses import dataclass

from huffzip.code import Code


@dataclass(eq=False)
class Node:
    """A Huffman tree node: a leaf carries a byte, an inner node joins two subtrees."""

    byte: int
    frequency: int
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None


def generate_codes(root: Node | None) -> dict[int, Code]:
    """Map each leaf byte to its path from the root (0 = left, 1 = right)."""
    codes: dict[int, Code] = {}
    if root is None:
        return codes
    stack: list[tuple[Node, tuple[int, ...]]] = [(root, ())]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            codes[node.byte] = Code(path)
            continue
        if node.right is not None:
            stack.append((node.right, path + (1,)))
        if node.left is not None:
            stack.append((node.left, path + (0,)))
    return codes