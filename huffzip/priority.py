"""Priority queue of tree nodes and Huffman tree construction."""

from __future__ import annotations

import bisect
from collections.abc import Iterator

from huffzip.frequency import FrequencyTable
from huffzip.tree import Node


def _weight(node: Node) -> int:
    return node.frequency


class PriorityQueue:
    """Nodes ordered by ascending frequency; equal frequencies keep insertion order."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def insert(self, node: Node) -> None:
        """Insert a node after every node of equal or lower frequency."""
        bisect.insort_right(self._nodes, node, key=_weight)

    def pop(self) -> Node:
        """Remove and return the node with the lowest frequency."""
        if not self._nodes:
            raise IndexError("pop from an empty priority queue")
        return self._nodes.pop(0)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes))

    @classmethod
    def from_table(cls, table: FrequencyTable) -> PriorityQueue:
        """Build a queue holding a leaf for every byte counted in the table."""
        queue = cls()
        for node in table.nodes():
            queue.insert(node)
        return queue


def build_tree(queue: PriorityQueue) -> Node:
    """Merge the queue's nodes into one Huffman tree, emptying the queue."""
    if not len(queue):
        raise ValueError("cannot build a tree from an empty queue")
    while len(queue) > 1:
        left = queue.pop()
        right = queue.pop()
        queue.insert(Node(0, left.frequency + right.frequency, left, right))
    return queue.pop()