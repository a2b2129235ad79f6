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

import inkex


class TreeStyle():
    '''Store the geometry and appearance parameters used to lay out and
    draw a binary tree.'''

    def __init__(self, radius=12, max_depth=4, level_height=60,
                 base_distance=20, top_margin=65, line_color='#ffffff',
                 marker_color='#ff0000', text_color='white',
                 font='Arial,15'):
        if max_depth < 1:
            raise ValueError('max_depth must be at least 1 but is %s' %
                             repr(max_depth))
        self.radius = radius
        self.max_depth = max_depth
        self.level_height = level_height
        self.base_distance = base_distance
        self.top_margin = top_margin
        self.line_color = line_color
        self.marker_color = marker_color
        self.text_color = text_color
        self.font = font

    def child_offset(self, depth):
        '''Return the horizontal distance from a node at the given depth
        to each of its children.  The distance halves at every level.'''
        return 2**(self.max_depth - depth)*self.base_distance/2


def draw_label(surface, style, node, anchor):
    "Draw a node's value centered on a given point."
    msg = str(node.value)
    wd, ht = surface.measure_text(style.font, msg)
    top_left = inkex.Vector2d(anchor.x - wd/2, anchor.y - ht/2)
    surface.draw_text(top_left, msg, style.text_color, style.font)


def draw_node(surface, style, anchor, node, depth=0):
    '''Recursively draw the edges, markers, and labels of a node's
    descendants, given the node's own anchor point.  The node's own
    marker is left to the caller.  Return the number of markers drawn.'''
    if node is None:
        return 0

    # Compute where the children go.
    offset = style.child_offset(depth)
    left = inkex.Vector2d(anchor.x - offset, anchor.y + style.level_height)
    right = inkex.Vector2d(anchor.x + offset, anchor.y + style.level_height)

    # Draw the edges first so the children's markers cover their ends.
    if node.left is not None:
        surface.draw_line(anchor, left, style.line_color)
    if node.right is not None:
        surface.draw_line(anchor, right, style.line_color)

    # Descend unless the children are already at the maximum depth.
    ndrawn = 0
    if depth + 1 < style.max_depth:
        ndrawn += draw_node(surface, style, left, node.left, depth + 1)
        ndrawn += draw_node(surface, style, right, node.right, depth + 1)

    # Draw the markers only after everything below them is done.
    for child, pos in [(node.left, left), (node.right, right)]:
        if child is not None:
            surface.draw_circle(pos, style.radius, style.marker_color,
                                style.line_color)
            ndrawn += 1
    for child, pos in [(node.left, left), (node.right, right)]:
        if child is not None:
            draw_label(surface, style, child, pos)
    return ndrawn


def draw_tree(surface, style, root):
    '''Draw an entire tree horizontally centered on the surface, and
    return the number of markers drawn.'''
    if root is None:
        return 0
    pos = inkex.Vector2d(surface.width/2, style.radius + style.top_margin)
    ndrawn = draw_node(surface, style, pos, root)

    # The root has no parent call to draw its marker for it.
    surface.draw_circle(pos, style.radius, style.marker_color,
                        style.line_color)
    draw_label(surface, style, root, pos)
    return ndrawn + 1
