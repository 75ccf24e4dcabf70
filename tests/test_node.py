import pytest

from bintree.node import BinaryTreeNode, delete


def _basic_tree():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(402, root)
    return root


@pytest.fixture
def family_tree():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(128, root)
    root.left.right = BinaryTreeNode(54, root.left)
    root.right.right = BinaryTreeNode(402, root.right)
    root.left.left = BinaryTreeNode(10, root.left)
    root.right.left = BinaryTreeNode(110, root.right)
    root.right.right.left = BinaryTreeNode(200, root.right.right)
    root.right.right.right = BinaryTreeNode(512, root.right.right)
    return root


def test_new_node_fields():
    root = BinaryTreeNode(98)
    child = BinaryTreeNode(12, root)
    assert root.value == 98
    assert root.parent is None
    assert child.parent is root
    assert child.left is None and child.right is None
    # Creating a node does not attach it.
    assert root.left is None and root.right is None


def test_insert_left_pushes_existing_child_down():
    root = _basic_tree()
    old_left = root.left
    new_right_left = root.right.insert_left(128)
    new_left = root.insert_left(54)

    assert root.left is new_left
    assert new_left.value == 54
    assert new_left.parent is root
    assert new_left.left is old_left
    assert old_left.parent is new_left
    assert new_left.right is None

    assert root.right.left is new_right_left
    assert new_right_left.value == 128
    assert new_right_left.parent is root.right
    assert new_right_left.left is None


def test_insert_right_pushes_existing_child_down():
    root = _basic_tree()
    old_right = root.right
    n54 = root.left.insert_right(54)
    n128 = root.insert_right(128)

    assert root.left.right is n54
    assert n54.parent is root.left
    assert n54.right is None

    assert root.right is n128
    assert n128.parent is root
    assert n128.right is old_right
    assert old_right.parent is n128
    assert n128.left is None
    assert [root.value, root.right.value, root.right.right.value] == [98, 128, 402]


def test_is_leaf():
    root = _basic_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.is_leaf() is False
    assert root.right.is_leaf() is False
    assert root.right.right.is_leaf() is True


def test_is_root():
    root = _basic_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.is_root() is True
    assert root.right.is_root() is False
    assert root.right.right.is_root() is False


def test_sibling(family_tree):
    root = family_tree
    assert root.left.sibling() is root.right
    assert root.right.left.sibling() is root.right.right
    assert root.left.right.sibling() is root.left.left
    assert root.sibling() is None


def test_sibling_missing():
    root = BinaryTreeNode(1)
    only = root.insert_left(2)
    assert only.sibling() is None


def test_uncle(family_tree):
    root = family_tree
    assert root.right.left.uncle() is root.left
    assert root.left.right.uncle() is root.right
    assert root.left.uncle() is None
    assert root.uncle() is None


def test_uncle_missing():
    root = BinaryTreeNode(1)
    parent = root.insert_left(2)
    child = parent.insert_left(3)
    assert child.uncle() is None


def test_delete_unlinks_everything(family_tree):
    root = family_tree
    nodes = [root, root.left, root.right, root.left.left, root.right.right.right]
    delete(root)
    for node in nodes:
        assert node.left is None
        assert node.right is None
        assert node.parent is None


def test_delete_subtree_detaches_from_parent(family_tree):
    root = family_tree
    subtree = root.right
    delete(subtree)
    assert root.right is None
    assert subtree.parent is None
    assert root.left.value == 12


def test_delete_none_is_harmless():
    root = _basic_tree()
    delete(None)
    assert root.left.value == 12 and root.right.value == 402


def test_repr():
    assert repr(BinaryTreeNode(7)) == "BinaryTreeNode(7)"