from readmegen.core.tree.node import TreeNode

LINE = "│  "
BLANK = "   "
LAST_BRANCH = "└──"
BRANCH = "├──"
INDENT = " " * 4


def render_tree(tree: TreeNode, depth: int = 0, is_last: bool = True) -> str:
    """Render a tree as box-drawn text, one newline-terminated line per node.

    After every non-last child the parent's indent plus a connector is
    appended without a newline, so it prefixes the next sibling's line.
    """
    indent = INDENT * depth
    out = f"{indent}{LAST_BRANCH if is_last else BRANCH}{tree.label}\n"

    if tree.is_dir:
        last_index = len(tree.children) - 1
        for index, child in enumerate(tree.children):
            is_last_child = index == last_index
            out += render_tree(child, depth + 1, is_last_child)
            if not is_last_child:
                out += f"{indent}{BLANK if is_last else LINE}"
    return out
