from huffzip.code import Code
from huffzip.tree import Node, generate_codes


def _sample_tree():
    a = Node(ord("a"), 5)
    b = Node(ord("b"), 2)
    c = Node(ord("c"), 1)
    d = Node(ord("d"), 1)
    cd = Node(0, 2, c, d)
    bcd = Node(0, 4, b, cd)
    return Node(0, 9, a, bcd)


def test_is_leaf():
    leaf = Node(1, 1)
    inner = Node(0, 2, leaf, Node(2, 1))
    assert leaf.is_leaf()
    assert not inner.is_leaf()


def test_empty_tree_has_no_codes():
    assert generate_codes(None) == {}


def test_single_leaf_gets_empty_code():
    codes = generate_codes(Node(65, 3))
    assert codes == {65: Code()}
    assert len(codes[65]) == 0


def test_left_is_zero_right_is_one():
    root = Node(0, 2, Node(10, 1), Node(20, 1))
    codes = generate_codes(root)
    assert list(codes[10]) == [0]
    assert list(codes[20]) == [1]


def test_codes_cover_every_leaf():
    codes = generate_codes(_sample_tree())
    assert set(codes) == {ord(ch) for ch in "abcd"}


def test_codes_follow_paths():
    codes = generate_codes(_sample_tree())
    root = _sample_tree()
    for byte, code in codes.items():
        node = root
        for bit in code:
            node = node.left if bit == 0 else node.right
        assert node.is_leaf()
        assert node.byte == byte


def test_codes_are_prefix_free():
    codes = [tuple(code) for code in generate_codes(_sample_tree()).values()]
    for first in codes:
        for second in codes:
            if first is not second:
                assert second[: len(first)] != first