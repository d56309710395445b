"""
Purpose: Orchestrator (the "glue") between the I/O layer and the ranking engine.
What it does:
Takes everybody gathered at the start point and, for every passenger,
suggests the drivers ordered from the best to the worst match.
Either every passenger gets a suggestion or the first precondition failure
propagates: there are no partial results.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from drivers.models import Driver, Participants, Person
from drivers.policy import SuggestionPolicy, default_suggestion_policy, start_point_from_env
from drivers.selection import suggest_drivers
from geometry import Point

logger = logging.getLogger(__name__)


def suggest_for_passengers(
    start_point: Point,
    passengers: Iterable[Person],
    drivers: Iterable[Driver],
    policy: Optional[SuggestionPolicy] = None,
) -> Dict[str, List[Driver]]:
    """
    Rank the drivers for each passenger.

    Returns:
        passenger id -> drivers ordered best first, in the order the passengers were given

    Raises:
        ValueError: two passengers share an id
    """
    policy = policy or default_suggestion_policy()
    drivers = list(drivers)

    suggestions: Dict[str, List[Driver]] = {}
    for passenger in passengers:
        if passenger.id in suggestions:
            raise ValueError(f"Passenger id {passenger.id!r} is used more than once")
        suggestions[passenger.id] = suggest_drivers(start_point, passenger, drivers, policy)

    logger.info(f"Suggested drivers for {len(suggestions)} passengers from {len(drivers)} drivers")
    return suggestions


def suggest_for_participants(
    participants: Participants,
    start_point: Optional[Point] = None,
    policy: Optional[SuggestionPolicy] = None,
) -> Dict[str, List[Driver]]:
    """
    Same as suggest_for_passengers; the start point defaults to the configured one
    (START_LAT / START_LON, see drivers.policy).
    """
    start_point = start_point or start_point_from_env()
    return suggest_for_passengers(start_point, participants.passengers, participants.drivers, policy)


def format_suggestions(passengers: Iterable[Person], suggestions: Dict[str, List[Driver]]) -> List[str]:
    """
    Render suggestions as report lines:

        Passenger point: <lat>, <lon>
          <driver lat>, <driver lon>
          ...
    """
    lines: List[str] = []
    for passenger in passengers:
        point = passenger.finish_point
        lines.append(f"Passenger point: {point.latitude}, {point.longitude}")
        for driver in suggestions.get(passenger.id, []):
            lines.append(f"  {driver.finish_point.latitude}, {driver.finish_point.longitude}")
    return lines
