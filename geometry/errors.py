"""
Purpose: Exceptions raised by the geometry layer.
What it does:
Signals caller/input errors (precondition violations). Nothing here is
recoverable: the exceptions propagate to whoever built the bad input.
"""


class GeometryError(ValueError):
    """Base class for geometry precondition failures."""
    pass


class InvalidAreaError(GeometryError):
    """Raised when an area is constructed from invalid data
    (negative circle radius, polygon without vertices)."""
    pass


class DegenerateAngleError(GeometryError):
    """Raised when an angle is requested at a vertex that coincides with one of the ray ends."""
    pass
