"""
Purpose: Central configuration for driver suggestions.
What it does:

Stores the tunable constants of the ranking heuristic:

DETOUR_ANGLE_DEG = 40
DETOUR_DISTANCE_RATIO = 0.7
ANGLE_BUCKET_DEG = 10
COMPLEXITY_SCALE = 10

and the shared start point everybody leaves from.
Values can be overridden from the environment (or a .env file).

Rule: No ranking logic here. Besides the parameters there is only the
parsing of their environment overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

from geometry import Point

# Example in .env:
# SUGGEST_DETOUR_ANGLE_DEG=40
# START_LAT=59.9815845
# START_LON=30.2144768
load_dotenv()

DEFAULT_START_POINT = Point(latitude=59.9815845, longitude=30.2144768)

T = TypeVar("T")


@dataclass(frozen=True)
class SuggestionPolicy:
    """
    Central configuration for ranking drivers for a passenger.

    Notes:
    - the "complexity" of taking a passenger is (SP + PD) / SD, scaled by
      `complexity_scale` and rounded (10 means no detour at all).
    - when the driver's point is roughly behind the passenger's point
      (angle < `detour_angle_deg`) and the way back is long
      (PD > `detour_distance_ratio` * SP) the raw detour SP + PD is used instead.
    - angles are compared in buckets of `angle_bucket_deg` degrees; drivers in
      the same bucket are ordered by their own distance from the start.
    """

    # --- "Behind the passenger" detour penalty ---
    detour_angle_deg: int = 40
    detour_distance_ratio: float = 0.7

    # --- Angle tie-break ---
    angle_bucket_deg: int = 10

    # --- Complexity coefficient scaling before rounding ---
    complexity_scale: int = 10

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not 0 <= self.detour_angle_deg <= 180:
            raise ValueError("detour_angle_deg must be within [0, 180]")

        if self.detour_distance_ratio < 0:
            raise ValueError("detour_distance_ratio must be >= 0")

        if self.angle_bucket_deg <= 0:
            raise ValueError("angle_bucket_deg must be > 0")

        if self.complexity_scale <= 0:
            raise ValueError("complexity_scale must be > 0")


def default_suggestion_policy() -> SuggestionPolicy:
    """
    Convenience factory for the default policy.
    """
    p = SuggestionPolicy()
    p.validate()
    return p


def _env_value(name: str, parse: Callable[[str], T], default: T) -> T:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e


def policy_from_env(base: Optional[SuggestionPolicy] = None) -> SuggestionPolicy:
    """
    Build a policy from SUGGEST_* environment variables, falling back to `base`
    (or the defaults) for anything unset.
    """
    base = base or SuggestionPolicy()
    p = SuggestionPolicy(
        detour_angle_deg=_env_value("SUGGEST_DETOUR_ANGLE_DEG", int, base.detour_angle_deg),
        detour_distance_ratio=_env_value("SUGGEST_DETOUR_DISTANCE_RATIO", float, base.detour_distance_ratio),
        angle_bucket_deg=_env_value("SUGGEST_ANGLE_BUCKET_DEG", int, base.angle_bucket_deg),
        complexity_scale=_env_value("SUGGEST_COMPLEXITY_SCALE", int, base.complexity_scale),
    )
    p.validate()
    return p


def start_point_from_env() -> Point:
    """
    The shared start point, from START_LAT / START_LON if both are set.
    """
    lat = _env_value("START_LAT", float, None)
    lon = _env_value("START_LON", float, None)
    if lat is None and lon is None:
        return DEFAULT_START_POINT
    if lat is None or lon is None:
        raise ValueError("START_LAT and START_LON must be set together")
    return Point(lat, lon)
