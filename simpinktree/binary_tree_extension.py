#! /usr/bin/env python

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
from simpinktree.svg_surface import SvgSurface
from simpinktree.tree_drawing import TreeStyle, draw_tree
from simpinktree.tree_model import sample_tree


class BinaryTreeExtension(inkex.EffectExtension):
    'Draw a sample binary tree onto the current document.'

    def add_arguments(self, pars):
        'Process program parameters passed in from the UI.'
        pars.add_argument('--tab', dest='tab',
                          help='The selected UI tab when OK was pressed')
        pars.add_argument('--radius', type=float, default=12,
                          help='Radius of each node marker')
        pars.add_argument('--max-depth', type=int, default=4,
                          help='Number of levels below the root to draw')
        pars.add_argument('--level-height', type=float, default=60,
                          help='Vertical distance between levels')
        pars.add_argument('--base-distance', type=float, default=20,
                          help='Horizontal distance between the deepest'
                               ' siblings')
        pars.add_argument('--top-margin', type=float, default=65,
                          help='Space above the root marker')
        pars.add_argument('--line-color', type=str, default='#ffffff',
                          help='Color of edges and marker outlines')
        pars.add_argument('--marker-color', type=str, default='#ff0000',
                          help='Fill color of node markers')
        pars.add_argument('--text-color', type=str, default='white',
                          help='Color of node labels')
        pars.add_argument('--font', type=str, default='Arial,15',
                          help='Node label font as "Family,size"')
        pars.add_argument('--title', type=str,
                          default='Binary Tree Example (12 Samples)',
                          help='Caption drawn above the tree'
                               ' (empty for none)')
        pars.add_argument('--title-font', type=str, default='Arial,25',
                          help='Caption font as "Family,size"')
        pars.add_argument('--title-top', type=float, default=15,
                          help='Distance from the top of the canvas to the'
                               ' caption')
        pars.add_argument('--background', type=inkex.Boolean, default=True,
                          help='Fill the canvas with a gradient first')
        pars.add_argument('--background-top', type=str, default='#000000',
                          help='Background color at the top of the canvas')
        pars.add_argument('--background-bottom', type=str, default='#1e5a8c',
                          help='Background color at the bottom of the canvas')
        pars.add_argument('--verbose', type=inkex.Boolean, default=False,
                          help='Report how many nodes were drawn')

    def tree_style(self):
        'Construct a TreeStyle from the extension options.'
        opts = self.options
        try:
            return TreeStyle(radius=opts.radius,
                             max_depth=opts.max_depth,
                             level_height=opts.level_height,
                             base_distance=opts.base_distance,
                             top_margin=opts.top_margin,
                             line_color=opts.line_color,
                             marker_color=opts.marker_color,
                             text_color=opts.text_color,
                             font=opts.font)
        except ValueError as err:
            raise inkex.AbortExtension(str(err))

    def draw_title(self, surface):
        'Draw the caption horizontally centered near the top of the canvas.'
        opts = self.options
        wd, _ = surface.measure_text(opts.title_font, opts.title)
        top_left = inkex.Vector2d((surface.width - wd)/2, opts.title_top)
        surface.draw_text(top_left, opts.title, opts.text_color,
                          opts.title_font)

    def effect(self):
        'Draw the background, the caption, and the tree.'
        style = self.tree_style()
        surface = SvgSurface(self.svg)
        try:
            if self.options.background:
                surface.fill_background(self.options.background_top,
                                        self.options.background_bottom)
            if self.options.title != '':
                self.draw_title(surface)
            root = sample_tree()
            ndrawn = draw_tree(surface, style, root)
        except ValueError as err:
            # Malformed font strings are reported like any other bad option.
            raise inkex.AbortExtension(str(err))
        if self.options.verbose:
            ntotal = len(list(root.walk()))
            inkex.utils.debug('Drew %d of %d nodes to a maximum depth of %d' %
                              (ndrawn, ntotal, style.max_depth))


def main():
    BinaryTreeExtension().run()


if __name__ == '__main__':
    main()
