import dataclasses

import pytest

from d2shared.geometry import Path, Rectangle


def test_edges():
    rect = Rectangle(10, 20, 30, 40)
    assert rect.right() == 40
    assert rect.bottom() == 60


def test_contains_includes_top_left():
    rect = Rectangle(10, 20, 30, 40)
    assert rect.contains(rect.left, rect.top)
    assert rect.contains(rect.right() - 1, rect.bottom() - 1)


def test_contains_excludes_far_edges_and_outside():
    rect = Rectangle(10, 20, 30, 40)
    assert not rect.contains(rect.right(), rect.top)
    assert not rect.contains(rect.left, rect.bottom())
    assert not rect.contains(rect.left - 1, rect.top)
    assert not rect.contains(rect.left, rect.top - 1)


def test_empty_rectangle_contains_nothing():
    rect = Rectangle(5, 5, 0, 0)
    assert not rect.contains(5, 5)


def test_path_fields_and_equality():
    path = Path(3, 4, 7)
    assert (path.x, path.y, path.action) == (3, 4, 7)
    assert path == Path(3, 4, 7)


def test_rectangle_is_immutable():
    rect = Rectangle(0, 0, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rect.left = 2
    assert rect.left == 0
    assert rect.right() == 1