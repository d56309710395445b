#Marks geometry as a package.
#Re-exports the public primitives so other modules import from geometry
#without knowing internal file names.
#No ranking logic here.

from .errors import GeometryError, InvalidAreaError, DegenerateAngleError
from .point import (
    EARTH_RADIUS_M,
    LatLon,
    Orientation,
    Point,
    angle,
    distance_between,
    orientation,
    round_half_up,
    to_point,
)
from .segment import Segment
from .area import Area, Circle, Polygon, polygon_of

__all__ = [
    "EARTH_RADIUS_M",
    "LatLon",
    "Point",
    "to_point",
    "distance_between",
    "angle",
    "Orientation",
    "orientation",
    "round_half_up",
    "Segment",
    "Area",
    "Circle",
    "Polygon",
    "polygon_of",
    "GeometryError",
    "InvalidAreaError",
    "DegenerateAngleError",
]
