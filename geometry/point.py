"""
Purpose: Geometric primitives for geographic points.
What it does:
- Point value type (latitude, longitude) in decimal degrees
- great-circle distance in meters (haversine, spherical Earth R = 6 371 km)
- angle between three points, treated as plain 2-D vectors
- orientation (turn direction) of three points in the lat/lon plane

Rule: planar helpers (angle, orientation) are approximations that are fine
for city-sized areas, they are not geodesically corrected.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import acos, atan2, cos, degrees, floor, radians, sin, sqrt
from typing import Tuple

from .errors import DegenerateAngleError

#internal coordinate type :(lat,lon)
LatLon = Tuple[float, float]

# Earth's radius in meters (spherical approximation)
EARTH_RADIUS_M = 6_371_000


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (round() would give banker's rounding)."""
    return int(floor(value + 0.5))


@dataclass(frozen=True)
class Point:
    """
    A geographic point in decimal degrees.
    Equality is exact field equality, not "close on the globe".
    """
    latitude: float
    longitude: float

    def as_tuple(self) -> LatLon:
        return (self.latitude, self.longitude)

    def distance_to(self, other: Point) -> int:
        return distance_between(self, other)

    def __sub__(self, other: Point) -> Point:
        return Point(self.latitude - other.latitude, self.longitude - other.longitude)

    def dot(self, other: Point) -> float:
        return self.latitude * other.latitude + self.longitude * other.longitude

    def vector_length(self) -> float:
        return sqrt(self.latitude ** 2 + self.longitude ** 2)


def to_point(latitude: float, longitude: float) -> Point:
    return Point(float(latitude), float(longitude))


def distance_between(p: Point, q: Point) -> int:
    """
    Great-circle distance between two points using the haversine formula.

    Args:
        p: first point (decimal degrees)
        q: second point (decimal degrees)

    Returns:
        distance in meters, rounded to the nearest meter
    """
    def haversine(x: float) -> float:
        return sin(x / 2) ** 2

    delta_lat = radians(p.latitude - q.latitude)
    delta_lon = radians(p.longitude - q.longitude)

    a = haversine(delta_lat) + cos(radians(p.latitude)) * cos(radians(q.latitude)) * haversine(delta_lon)
    # rounding can push `a` just past 1 for antipodal points
    a = min(1.0, a)

    return round_half_up(EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a)))


def angle(a: Point, b: Point, c: Point) -> int:
    """
    Angle at vertex `b` between rays b->a and b->c, in whole degrees [0, 180].

    Raises:
        DegenerateAngleError: if `a` or `c` coincides with `b` (zero-length ray)
    """
    vector_a = a - b
    vector_c = c - b

    length_product = vector_a.vector_length() * vector_c.vector_length()
    if length_product == 0:
        raise DegenerateAngleError(f"Angle at {b} is undefined: ray ends {a} and {c} must differ from the vertex")

    # clamp: rounding can push collinear vectors slightly outside acos' domain
    cosine = max(-1.0, min(1.0, vector_a.dot(vector_c) / length_product))

    return round_half_up(degrees(acos(cosine)))


class Orientation(Enum):
    RIGHT = "RIGHT"
    COLLINEAR = "COLLINEAR"
    LEFT = "LEFT"


def orientation(a: Point, b: Point, c: Point) -> Orientation:
    """
    Which side of the directed line a->b the point c lies on,
    using the cross product in (latitude, longitude) plane coordinates.
    """
    cross = (c.latitude - a.latitude) * (b.longitude - a.longitude) - \
        (c.longitude - a.longitude) * (b.latitude - a.latitude)

    if cross < 0:
        return Orientation.RIGHT
    if cross == 0:
        return Orientation.COLLINEAR
    return Orientation.LEFT
