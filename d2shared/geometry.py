"""Simple geometric value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    left: int
    top: int
    width: int
    height: int

    def bottom(self) -> int:
        return self.top + self.height

    def right(self) -> int:
        return self.left + self.width

    def contains(self, x: int, y: int) -> bool:
        """True when the point lies inside; right and bottom edges are excluded."""
        return self.left <= x < self.right() and self.top <= y < self.bottom()


@dataclass(frozen=True)
class Path:
    x: int
    y: int
    action: int