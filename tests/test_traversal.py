import pytest

from bintree.node import Node
from bintree.traversal import inorder, postorder, preorder


def _tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _chain(values):
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = node.insert_left(value)
    return root


def test_preorder():
    assert list(preorder(_tree())) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder():
    assert list(inorder(_tree())) == [6, 12, 56, 98, 256, 402, 512]


def test_postorder():
    assert list(postorder(_tree())) == [6, 56, 12, 256, 512, 402, 98]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_empty_tree_yields_nothing(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_single_node(walk):
    assert list(walk(Node(7))) == [7]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_every_value_visited_once(walk):
    assert sorted(walk(_tree())) == sorted(preorder(_tree()))
    assert len(list(walk(_tree()))) == len(set(walk(_tree())))


def test_preorder_starts_with_root_and_postorder_ends_with_root():
    root = _tree()
    assert next(preorder(root)) == root.value
    assert list(postorder(root))[-1] == root.value


def test_left_chain_orders():
    values = [3, 2, 1]
    root = _chain(values)
    assert list(preorder(root)) == values
    assert list(inorder(root)) == list(reversed(values))
    assert list(postorder(root)) == list(reversed(values))


def test_deep_chain_does_not_overflow():
    values = list(range(5000))
    root = _chain(values)
    assert list(preorder(root)) == values
    assert list(inorder(root)) == values[::-1]


def test_traversal_of_subtree():
    root = _tree()
    assert list(inorder(root.right)) == [256, 402, 512]
    assert list(preorder(root.left)) == [12, 6, 56]