"""Points created through named factory methods."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the plane with Cartesian coordinates."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"x: {self.x:g} y: {self.y:g}"


class PointFactory:
    """Creates points from Cartesian or polar coordinates."""

    @staticmethod
    def new_cartesian(x: float, y: float) -> Point:
        return Point(x, y)

    @staticmethod
    def new_polar(r: float, theta: float) -> Point:
        return Point(r * math.cos(theta), r * math.sin(theta))