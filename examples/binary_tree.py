####################################################################
# Draw the twelve-value sample tree onto a blank 700x320 canvas    #
# and write the result to an SVG file (binary_tree.svg by default).#
####################################################################

import sys
from io import BytesIO

import inkex
from simpinktree import draw_tree, sample_tree, SvgSurface, TreeStyle

blank = b'''<svg xmlns="http://www.w3.org/2000/svg"
     width="700" height="320" viewBox="0 0 700 320"/>'''

# Prepare a surface with the same backdrop as the extension uses.
svg = inkex.load_svg(BytesIO(blank)).getroot()
surface = SvgSurface(svg)
surface.fill_background('#000000', '#1e5a8c')

# Draw the tree with the default layout.
draw_tree(surface, TreeStyle(), sample_tree())

fname = sys.argv[1] if len(sys.argv) > 1 else 'binary_tree.svg'
with open(fname, 'w') as w:
    w.write(surface.svg(pretty_print=True))
