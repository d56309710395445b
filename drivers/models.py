"""
Purpose: Core data models for the drivers domain.
What it does:
Defines who takes part in a ride suggestion: passengers (Person) with the
point they are heading to, and drivers that may additionally restrict the
area where they are willing to drop a passenger off.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional, Tuple

from geometry import Area, Point


@dataclass(frozen=True)
class Person:
    """
    A passenger: an identity and the point they are heading to.
    """
    id: str
    finish_point: Point

    @classmethod
    def new(cls, lat: float, lon: float, person_id: Optional[str] = None) -> Person:
        return cls(id=person_id or str(uuid.uuid4()), finish_point=Point(lat, lon))


@dataclass(frozen=True)
class Driver(Person):
    """
    A driver heading home to `finish_point`.
    `preferred_area` is None when the driver accepts passengers going anywhere.
    """
    preferred_area: Optional[Area] = None

    @classmethod
    def new(
        cls,
        lat: float,
        lon: float,
        preferred_area: Optional[Area] = None,
        driver_id: Optional[str] = None,
    ) -> Driver:
        return cls(
            id=driver_id or str(uuid.uuid4()),
            finish_point=Point(lat, lon),
            preferred_area=preferred_area,
        )


@dataclass(frozen=True)
class Participants:
    """
    Everyone gathered at the start point, as handed over by the I/O layer.
    """
    passengers: Tuple[Person, ...] = field(default_factory=tuple)
    drivers: Tuple[Driver, ...] = field(default_factory=tuple)
