"""
Purpose: Directed segment between two points.
Used only as a helper for polygon boundary tests.
"""

from __future__ import annotations

from dataclasses import dataclass

from .point import Orientation, Point, orientation


@dataclass(frozen=True)
class Segment:
    a: Point
    b: Point

    def __contains__(self, point: Point) -> bool:
        # longitude is not checked: collinearity already pins it down
        low = min(self.a.latitude, self.b.latitude)
        high = max(self.a.latitude, self.b.latitude)
        return orientation(self.a, self.b, point) == Orientation.COLLINEAR and low <= point.latitude <= high
