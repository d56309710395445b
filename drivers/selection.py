"""
Purpose: Business rules for suggesting drivers to a passenger.
What it does:
Accepts the shared start point, a passenger and a pool of drivers and
orders the drivers from the most to the least suitable one:

  1. drivers whose preferred area contains the passenger's point (or who
     have no preferred area at all) come first
  2. then by "complexity": how much harder it is for the driver to take the
     passenger along than to drive home alone

Complexity coefficient:
    (SP + PD) / SD
      SP - distance from the start point to the passenger point
      PD - distance from the passenger point to the driver point
      SD - distance from the start point to the driver point
It equals 1 when the three points lie on one line in that order, i.e. the
driver does not leave their way at all.

The coefficient alone misranks two cases, so there are extra rules:
  - drivers at roughly the same angle from the passenger: the one closer to
    the start should take the passenger
  - a driver point on the opposite side of the passenger point: going there
    and coming back is costly, the raw detour SP + PD is used instead
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Dict, Iterable, List, Optional

from geometry import Point, angle, distance_between, round_half_up
from .models import Driver, Person
from .policy import SuggestionPolicy, default_suggestion_policy

logger = logging.getLogger(__name__)


class DegenerateRankingError(ValueError):
    """Raised when a driver's finish point coincides with the start point (SD == 0)."""
    pass


@dataclass(frozen=True)
class DriverMetrics:
    """
    Everything the comparator needs for one driver, computed once per ranking.
    """
    prefers_passenger: bool
    angle_deg: int  # at the passenger point, between start and driver point
    start_to_passenger_m: int
    passenger_to_driver_m: int
    start_to_driver_m: int
    ranking_value: int


def prefers_passenger(driver: Driver, passenger_point: Point) -> bool:
    """
    True if the driver's preferred area contains the passenger point.
    A driver without a preferred area is not penalized: treated as matching.
    """
    if driver.preferred_area is None:
        return True
    return passenger_point in driver.preferred_area


def compute_driver_metrics(
    start_point: Point,
    passenger: Person,
    driver: Driver,
    policy: SuggestionPolicy,
) -> DriverMetrics:
    """
    Raises:
        DegenerateAngleError: passenger point equals the start or the driver point
        DegenerateRankingError: driver point is at the start point
    """
    passenger_point = passenger.finish_point
    driver_point = driver.finish_point

    raw_angle = angle(start_point, passenger_point, driver_point)
    start_to_passenger = distance_between(start_point, passenger_point)
    passenger_to_driver = distance_between(passenger_point, driver_point)
    start_to_driver = distance_between(start_point, driver_point)

    if start_to_driver == 0:
        raise DegenerateRankingError(
            f"Driver {driver.id} finishes at the start point {start_point}, complexity is undefined"
        )

    detour = start_to_passenger + passenger_to_driver
    if raw_angle < policy.detour_angle_deg and passenger_to_driver > policy.detour_distance_ratio * start_to_passenger:
        # driver point is behind the passenger point: penalize by the raw detour
        ranking_value = detour
    else:
        ranking_value = round_half_up(detour / start_to_driver * policy.complexity_scale)

    return DriverMetrics(
        prefers_passenger=prefers_passenger(driver, passenger_point),
        angle_deg=raw_angle,
        start_to_passenger_m=start_to_passenger,
        passenger_to_driver_m=passenger_to_driver,
        start_to_driver_m=start_to_driver,
        ranking_value=ranking_value,
    )


def _compare(first: DriverMetrics, second: DriverMetrics, policy: SuggestionPolicy) -> int:
    def sign(x: float) -> int:
        return (x > 0) - (x < 0)

    # 1. preferred area matches (True first)
    if first.prefers_passenger != second.prefers_passenger:
        return -1 if first.prefers_passenger else 1

    # 2. same angle bucket -> whoever finishes closer to the start
    if first.angle_deg // policy.angle_bucket_deg == second.angle_deg // policy.angle_bucket_deg:
        return sign(first.start_to_driver_m - second.start_to_driver_m)

    # 3. complexity (or detour penalty), then closer to the start
    by_value = sign(first.ranking_value - second.ranking_value)
    if by_value:
        return by_value
    return sign(first.start_to_driver_m - second.start_to_driver_m)


def suggest_drivers(
    start_point: Point,
    passenger: Person,
    drivers: Iterable[Driver],
    policy: Optional[SuggestionPolicy] = None,
) -> List[Driver]:
    """
    Return the drivers ordered from the best to the worst match for `passenger`.

    The input collection is not modified; a new list is returned. The sort is
    stable, so drivers that compare equal keep their input order.

    Args:
        start_point: where the passenger and all drivers start from
        passenger: passenger to find a driver for
        drivers: candidate drivers
        policy: heuristic constants (defaults to default_suggestion_policy())

    Raises:
        DegenerateAngleError, DegenerateRankingError: see compute_driver_metrics
    """
    policy = policy or default_suggestion_policy()
    drivers = list(drivers)

    #defensive : empty driver list edge case
    if not drivers:
        return []

    # keyed by position so equal drivers (same value) keep separate metrics
    metrics: Dict[int, DriverMetrics] = {
        index: compute_driver_metrics(start_point, passenger, driver, policy)
        for index, driver in enumerate(drivers)
    }

    order = sorted(
        metrics,
        key=cmp_to_key(lambda i, j: _compare(metrics[i], metrics[j], policy)),
    )

    logger.debug(
        f"Passenger {passenger.id}: ranked {len(drivers)} drivers, "
        f"{sum(m.prefers_passenger for m in metrics.values())} match by area"
    )
    return [drivers[index] for index in order]
