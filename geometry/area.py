"""
Purpose: Areas a driver can restrict themselves to.
What it does:
- Circle: center + radius in meters, boundary inclusive
- Polygon: closed loop of vertices, planar ray casting with boundary = inside

Both validate their data at construction (InvalidAreaError) so queries never fail.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, List, Tuple

from .errors import InvalidAreaError
from .point import Orientation, Point, orientation
from .segment import Segment

logger = logging.getLogger(__name__)


class Area(ABC):
    """A closed region with a point membership test. Supports `point in area`."""

    @abstractmethod
    def contains(self, point: Point) -> bool:
        ...

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)


@dataclass(frozen=True)
class Circle(Area):
    center: Point
    radius_m: int

    def __post_init__(self):
        if not isinstance(self.radius_m, Integral) or isinstance(self.radius_m, bool):
            raise InvalidAreaError(f"Circle radius must be a whole number of meters, got {self.radius_m!r}")
        if self.radius_m < 0:
            raise InvalidAreaError(f"Circle radius must be >= 0, got {self.radius_m}")

    def contains(self, point: Point) -> bool:
        # a zero radius circle is just its center
        if self.radius_m == 0:
            return point == self.center
        return self.center.distance_to(point) <= self.radius_m


@dataclass(frozen=True)
class Polygon(Area):
    """
    Polygon given by its vertices in order; the last vertex connects back to the first.

    A vertex repeated right after itself (including a ring closed explicitly
    as [A, B, C, A]) is collapsed, so no edge has zero length.

    Fewer than 3 distinct vertices are accepted. Such a polygon has no interior,
    so only points lying on its vertex or on the segment between its two
    vertices are reported as contained.

    Boundary points follow Segment membership (collinear + latitude range), so a
    point on the extension of an edge that runs along one latitude counts as
    on the boundary.
    """
    vertices: Tuple[Point, ...]

    def __init__(self, vertices: Iterable[Point]):
        # store as a tuple so a caller's list can't change the area afterwards
        object.__setattr__(self, "vertices", tuple(vertices))
        if not self.vertices:
            raise InvalidAreaError("Polygon needs at least one vertex")
        if len(self.ring()) < 3:
            logger.debug(f"Degenerate polygon with {len(self.ring())} distinct vertex(es): only its boundary is inside")

    def ring(self) -> Tuple[Point, ...]:
        """Vertices without consecutive duplicates (the last one compared with the first too)."""
        ring: List[Point] = []
        for vertex in self.vertices:
            if not ring or ring[-1] != vertex:
                ring.append(vertex)
        while len(ring) > 1 and ring[-1] == ring[0]:
            ring.pop()
        return tuple(ring)

    def edges(self) -> List[Segment]:
        """Consecutive ring vertex pairs plus the closing edge last -> first."""
        ring = self.ring()
        following = ring[1:] + ring[:1]
        return [Segment(a, b) for a, b in zip(ring, following)]

    def contains(self, point: Point) -> bool:
        if len(self.ring()) < 3:
            return self._on_degenerate_polygon(point)

        intersections = 0

        for edge in self.edges():
            # the boundary counts as inside
            if point in edge:
                return True

            if edge.a.longitude < edge.b.longitude:
                min_point, max_point = edge.a, edge.b
            else:
                min_point, max_point = edge.b, edge.a

            # half-open band so a shared vertex is counted once
            if max_point.longitude <= point.longitude or min_point.longitude > point.longitude:
                continue

            side = orientation(min_point, max_point, point)
            if side == Orientation.LEFT:
                intersections += 1
            elif side == Orientation.COLLINEAR:
                return True

        return intersections % 2 != 0

    def _on_degenerate_polygon(self, point: Point) -> bool:
        # no interior: a single vertex, or the segment between two vertices
        ring = self.ring()
        first, last = ring[0], ring[-1]
        if orientation(first, last, point) != Orientation.COLLINEAR:
            return False
        return min(first.latitude, last.latitude) <= point.latitude <= max(first.latitude, last.latitude) and \
            min(first.longitude, last.longitude) <= point.longitude <= max(first.longitude, last.longitude)


def polygon_of(first: Point, *others: Point) -> Polygon:
    """Build a polygon from positional vertices (always at least one)."""
    return Polygon((first,) + others)
