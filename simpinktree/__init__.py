from .tree_model import sample_tree, TreeNode
from .tree_drawing import draw_label, draw_node, draw_tree, TreeStyle
from .svg_surface import parse_font, SvgSurface
from .binary_tree_extension import BinaryTreeExtension, main
