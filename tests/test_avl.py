import pytest

from treekit.avl import AVLTree, is_avl, sorted_to_avl
from treekit.bst import is_bst
from treekit.node import Node
from treekit.traversal import inorder

ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]
BASIC = (98, (12, 10, 54), (128, None, 402))


def _make(spec, parent=None):
    if spec is None:
        return None
    parts = spec if isinstance(spec, tuple) else (spec, None, None)
    node = Node(parts[0], parent)
    node.left, node.right = (_make(child, node) for child in parts[1:])
    return node


def _well_linked(root):
    """Every node's parent pointer matches its position; the root has none."""
    pending = [(root, None)]
    while pending:
        node, parent = pending.pop()
        if node is None:
            continue
        if node.parent is not parent:
            return False
        pending += [(node.left, node), (node.right, node)]
    return True


def _check(tree, expected_values):
    assert list(inorder(tree.root)) == expected_values
    assert len(tree) == len(expected_values)
    assert _well_linked(tree.root)


@pytest.mark.parametrize(
    "spec, expected",
    [
        (BASIC, True),
        ((12, 10, 54), True),
        ((98, (12, 10, 54), (128, 97, 402)), False),
        ((98, (12, 10, 54), (128, None, (402, None, 430))), False),
        ((98, (12, 10, 54), (128, None, (402, None, (430, 420, None)))), False),
        (5, True),
        (None, False),
    ],
)
def test_is_avl(spec, expected):
    assert is_avl(_make(spec)) is expected


def test_insert_sequence_stays_balanced():
    tree = AVLTree()
    inserted = []
    for value in [98, 402, 12, 46, 128, 256, 512, 50]:
        assert tree.insert(value).value == value
        inserted.append(value)
        assert is_avl(tree.root)
        _check(tree, sorted(inserted))
    assert tree.root.value == 98


def test_insert_duplicate_raises():
    tree = AVLTree([10, 20])
    with pytest.raises(ValueError):
        tree.insert(10)
    assert len(tree) == 2


def test_ascending_inserts_are_rotated():
    tree = AVLTree(range(1, 32))
    assert is_avl(tree.root)
    assert list(inorder(tree.root)) == list(range(1, 32))
    assert tree.root.value == 16


@pytest.mark.parametrize(
    "values, expected",
    [(ARRAY, sorted(ARRAY)), ([5, 3, 5, 8, 3], [3, 5, 8])],
)
def test_build_from_values(values, expected):
    tree = AVLTree(values)
    assert is_avl(tree.root)
    _check(tree, expected)


def test_build_empty():
    tree = AVLTree([])
    assert tree.root is None
    assert len(tree) == 0


def test_search():
    tree = AVLTree(ARRAY)
    assert tree.search(32).value == 32
    assert tree.search(512) is None
    assert 62 in tree
    assert 63 not in tree


def test_remove_sequence():
    tree = AVLTree(ARRAY)
    remaining = sorted(ARRAY)
    for value in [47, 79, 32, 34, 22]:
        tree.remove(value)
        remaining.remove(value)
        assert value not in tree
        assert is_bst(tree.root)
        _check(tree, remaining)


def test_remove_absent_value_leaves_tree():
    tree = AVLTree(ARRAY)
    tree.remove(1000)
    _check(tree, sorted(ARRAY))


def test_remove_everything():
    tree = AVLTree([3, 1, 2])
    for value in [2, 1, 3, 7]:
        tree.remove(value)
    assert tree.root is None
    assert len(tree) == 0


def test_sorted_to_avl_shape():
    values = sorted(ARRAY)
    root = sorted_to_avl(values)
    assert (root.value, root.left.value, root.right.value) == (47, 21, 84)
    assert list(inorder(root)) == values
    assert is_avl(root)
    assert _well_linked(root)


@pytest.mark.parametrize("count", [1, 2, 3, 7, 10, 33])
def test_sorted_to_avl_is_avl(count):
    values = list(range(0, count * 3, 3))
    root = sorted_to_avl(values)
    assert list(inorder(root)) == values
    assert is_avl(root)
    assert root.value == values[(count - 1) // 2]


def test_sorted_to_avl_empty():
    assert sorted_to_avl([]) is None