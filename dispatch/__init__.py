#Expose the high-level pipeline pieces:
#Suggestions for every passenger (the "one call" entry point)
#Report rendering

from .dispatcher import suggest_for_passengers, suggest_for_participants, format_suggestions

__all__ = [
    "suggest_for_passengers",
    "suggest_for_participants",
    "format_suggestions",
]
