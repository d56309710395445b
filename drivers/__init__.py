"""
Drivers domain package.

Public API:
- Domain models: Person, Driver, Participants
- Policy: SuggestionPolicy, default_suggestion_policy, policy_from_env
- Ranking entry: suggest_drivers
"""
from .models import Person, Driver, Participants
from .policy import (
    DEFAULT_START_POINT,
    SuggestionPolicy,
    default_suggestion_policy,
    policy_from_env,
    start_point_from_env,
)
from .selection import DegenerateRankingError, DriverMetrics, compute_driver_metrics, prefers_passenger, suggest_drivers

__all__ = ["Person",
           "Driver",
             "Participants",
               "DEFAULT_START_POINT",
               "SuggestionPolicy",
               "default_suggestion_policy",
               "policy_from_env",
               "start_point_from_env",
               "DegenerateRankingError",
               "DriverMetrics",
               "compute_driver_metrics",
               "prefers_passenger",
               "suggest_drivers",
               ]
