"""Rectangle: a plain data object with behavior."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """An axis-aligned rectangle.

    >>> r = Rectangle(10, 20)
    >>> r.get_area()
    200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
