import os
import stat
from typing import Optional

from readmegen.core.tree.node import TreeNode


class TreeDepthExceededError(RuntimeError):
    pass


def path_label(path: str) -> str:
    return path.split("/")[-1]


def build_tree(path: str, max_depth: Optional[int] = None, _depth: int = 0) -> TreeNode:
    """
    Read ``path`` into a TreeNode, recursing into directories.

    Children keep the order returned by the directory listing. Filesystem
    errors (missing path, permissions) propagate to the caller.

    Args:
        path: File or directory to read
        max_depth: Optional limit on how many directory levels below ``path``
            may be descended into. None means unbounded.

    Raises:
        TreeDepthExceededError: If ``max_depth`` is set and exceeded
    """
    label = path_label(path)

    if not stat.S_ISDIR(os.stat(path).st_mode):
        return TreeNode(label=label)

    if max_depth is not None and _depth > max_depth:
        raise TreeDepthExceededError(
            f"Directory '{path}' is deeper than the maximum depth of {max_depth}"
        )

    children = [
        build_tree(f"{path}/{entry}", max_depth=max_depth, _depth=_depth + 1)
        for entry in os.listdir(path)
    ]
    return TreeNode(label=label, children=children)
