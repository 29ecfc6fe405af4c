from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class TreeNode:
    """One filesystem entry.

    ``children`` is None for files and a list (possibly empty) for directories.
    """

    label: str
    children: Optional[List[TreeNode]] = None

    @property
    def is_dir(self) -> bool:
        return self.children is not None
