###############################################
# Define a set of unit tests for the tree     #
# model used by the binary-tree drawing code. #
###############################################

from simpinktree.tree_model import sample_tree, TreeNode
import unittest


class TreeNodeTest(unittest.TestCase):
    'Test construction of binary-tree nodes.'

    def test_new_node_has_no_children(self):
        node = TreeNode(7)
        assert node.value == 7
        assert node.left is None
        assert node.right is None
        assert node.children() == []

    def test_add_children_positive(self):
        node = TreeNode(1).add_children(2, 3)
        assert node.left.value == 2
        assert node.right.value == 3
        assert node.left.children() == []

    def test_add_children_sentinel_left(self):
        node = TreeNode(1)
        node.add_children(-1, 5)
        assert node.left is None
        assert node.right.value == 5
        assert node.children() == [node.right]

    def test_add_children_zero_is_sentinel(self):
        node = TreeNode(1).add_children(0, 0)
        assert node.left is None
        assert node.right is None

    def test_walk_is_preorder(self):
        root = TreeNode(1).add_children(2, 3)
        root.left.add_children(4, -1)
        assert [n.value for n in root.walk()] == [1, 2, 4, 3]


class SampleTreeTest(unittest.TestCase):
    'Test the twelve-value sample tree.'

    def test_sample_values(self):
        root = sample_tree()
        assert [n.value for n in root.walk()] == \
            [1, 2, 4, 9, 10, 5, 11, 12, 3, 6, 7, 8]

    def test_sample_shape(self):
        root = sample_tree()
        assert root.right.right.left.value == 8
        assert root.right.right.right is None
        assert root.right.left.children() == []
        assert root.left.right.right.value == 12
