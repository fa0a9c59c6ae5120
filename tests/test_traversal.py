import pytest

from treekit.node import Node
from treekit.traversal import inorder, levelorder, postorder, preorder


def _sample_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


ALL_VALUES = [98, 12, 402, 6, 56, 256, 512]


def test_preorder_sample():
    assert list(preorder(_sample_tree())) == [98, 12, 6, 56, 402, 256, 512]


def test_postorder_sample():
    assert list(postorder(_sample_tree())) == [6, 56, 12, 256, 512, 402, 98]


def test_levelorder_sample():
    assert list(levelorder(_sample_tree())) == [98, 12, 402, 6, 56, 256, 512]


def test_inorder_of_search_tree_is_sorted():
    assert list(inorder(_sample_tree())) == sorted(ALL_VALUES)


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_every_walk_visits_each_node_once(walk):
    assert sorted(walk(_sample_tree())) == sorted(ALL_VALUES)


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_empty_tree_yields_nothing(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_single_node(walk):
    assert list(walk(Node(7))) == [7]


def test_preorder_starts_and_postorder_ends_with_root():
    root = _sample_tree()
    assert next(iter(preorder(root))) == root.value
    assert list(postorder(root))[-1] == root.value


def test_levelorder_lists_shallower_nodes_first():
    root = Node(1)
    root.insert_left(2).insert_left(4)
    root.insert_right(3)
    order = list(levelorder(root))
    assert order.index(3) < order.index(4)
    assert order[0] == 1


def test_walks_are_lazy_generators():
    walk = preorder(_sample_tree())
    assert next(walk) == 98
    assert next(walk) == 12


def test_left_only_chain():
    root = Node(3)
    root.insert_left(2).insert_left(1)
    assert list(inorder(root)) == [1, 2, 3]
    assert list(preorder(root)) == list(reversed(list(postorder(root))))