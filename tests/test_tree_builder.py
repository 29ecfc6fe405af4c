import os
from pathlib import Path

import pytest

from readmegen.core.tree import TreeDepthExceededError, TreeNode, build_tree


@pytest.fixture
def flat_dir(tmp_path: Path) -> Path:
    """A directory holding only the files a, b and c."""
    folder = tmp_path / "flat"
    folder.mkdir()
    for name in ("a", "b", "c"):
        (folder / name).write_text(name)
    return folder


def test_directory_of_files(flat_dir: Path):
    node = build_tree(flat_dir.as_posix())

    assert node.label == "flat"
    assert node.children is not None
    # listing order, not sorted order
    assert [child.label for child in node.children] == os.listdir(flat_dir)
    assert sorted(child.label for child in node.children) == ["a", "b", "c"]
    assert all(child.children is None for child in node.children)


def test_single_file(tmp_path: Path):
    file_path = tmp_path / "x" / "y.txt"
    file_path.parent.mkdir()
    file_path.write_text("hello")

    assert build_tree(file_path.as_posix()) == TreeNode(label="y.txt")
    assert build_tree(file_path.as_posix()).children is None


def test_empty_directory_has_empty_children(tmp_path: Path):
    empty = tmp_path / "empty"
    empty.mkdir()

    node = build_tree(empty.as_posix())

    assert node.children == []
    assert node.is_dir


def test_nested_directories(tmp_path: Path):
    root = tmp_path / "root"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "pkg" / "mod.py").write_text("")

    node = build_tree(root.as_posix())

    assert node == TreeNode(
        label="root",
        children=[
            TreeNode(
                label="src",
                children=[TreeNode(label="pkg", children=[TreeNode(label="mod.py")])],
            )
        ],
    )


def test_missing_path_propagates(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        build_tree((tmp_path / "nope").as_posix())


def test_max_depth(tmp_path: Path):
    root = tmp_path / "root"
    (root / "one" / "two").mkdir(parents=True)
    (root / "top.txt").write_text("")

    assert build_tree(root.as_posix(), max_depth=2).label == "root"
    with pytest.raises(TreeDepthExceededError):
        build_tree(root.as_posix(), max_depth=1)


def test_max_depth_zero_allows_files_in_root(flat_dir: Path):
    node = build_tree(flat_dir.as_posix(), max_depth=0)
    assert node.children is not None
    assert len(node.children) == 3
