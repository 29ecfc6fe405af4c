from .builder import TreeDepthExceededError, build_tree
from .node import TreeNode
from .render import render_tree

__all__ = ["TreeNode", "TreeDepthExceededError", "build_tree", "render_tree"]
