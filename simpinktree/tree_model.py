'''
Copyright (C) 2021-2023 Scott Pakin, scott-ink@pakin.org

This program is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program; if not, write to the Free Software
Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA
02110-1301, USA.
'''


class TreeNode():
    '''Represent one node of a binary tree.  Each node exclusively owns
    its left and right children, either of which may be None.'''

    def __init__(self, value, left=None, right=None):
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, repr(self.value))

    def add_children(self, left_value, right_value):
        '''Construct a left child if left_value is positive and a right
        child if right_value is positive.  Non-positive values mean "no
        child here".  Return the node itself so calls can be chained.'''
        if left_value > 0:
            self.left = TreeNode(left_value)
        if right_value > 0:
            self.right = TreeNode(right_value)
        return self

    def children(self):
        'Return a list of the children that exist, left first.'
        return [c for c in (self.left, self.right) if c is not None]

    def walk(self):
        'Iterate over the subtree rooted at this node in preorder.'
        yield self
        for child in self.children():
            yield from child.walk()


def sample_tree():
    'Return a four-level binary tree holding twelve values.'
    root = TreeNode(1)
    root.add_children(2, 3)
    root.left.add_children(4, 5)
    root.right.add_children(6, 7)
    root.right.right.add_children(8, -1)
    root.left.left.add_children(9, 10)
    root.left.right.add_children(11, 12)
    return root
