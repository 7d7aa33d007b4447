from __future__ import annotations

from fieldcheck.path import PathBuilder, extend_path
from fieldcheck.validatables import Validatable


def _chain() -> tuple[Validatable[int], Validatable[int], Validatable[int]]:
    root = Validatable(1)
    child = Validatable(2, "a", root)
    grandchild = Validatable(3, "b", child)
    return root, child, grandchild


def test_absolute_ignores_ancestry() -> None:
    _, _, grandchild = _chain()
    assert PathBuilder(grandchild).absolute("x", "y") == ("x", "y")


def test_relative_starts_from_parent_path() -> None:
    _, _, grandchild = _chain()
    assert PathBuilder(grandchild).relative("c") == ("a", "c")


def test_relative_without_parent_behaves_as_absolute() -> None:
    orphan = Validatable(1, "orphan")
    builder = PathBuilder(orphan)
    assert builder.relative("x", "y") == builder.absolute("x", "y")


def test_appended_extends_own_path() -> None:
    _, _, grandchild = _chain()
    builder = PathBuilder(grandchild)
    assert builder.original == ("a", "b")
    assert builder.appended("c", "d") == ("a", "b", "c", "d")


def test_empty_segments_are_preserved() -> None:
    root, _, _ = _chain()
    builder = PathBuilder(root)
    assert builder.absolute("") == ("",)
    assert builder.absolute() == ()
    assert builder.appended("", "x") == ("", "x")


def test_extend_path_skips_anonymous_segments() -> None:
    _, child, _ = _chain()
    assert extend_path(None, None) == ()
    assert extend_path(None, "root") == ("root",)
    assert extend_path(child, None) == ("a",)
    assert extend_path(child, "") == ("a",)
    assert extend_path(child, "z") == ("a", "z")


def test_child_path_extends_parent_path() -> None:
    root, child, grandchild = _chain()
    assert root.path == ()
    assert grandchild.path[: len(child.path)] == child.path
    assert grandchild.path == (*child.path, "b")
