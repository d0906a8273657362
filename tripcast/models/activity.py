"""Activity recommendation models."""

from dataclasses import dataclass
from enum import StrEnum


class Activity(StrEnum):
    # Declaration order is the tie-break order for equal scores.
    SKIING = "Skiing"
    SURFING = "Surfing"
    INDOOR_SIGHTSEEING = "Indoor Sightseeing"
    OUTDOOR_SIGHTSEEING = "Outdoor Sightseeing"


ACTIVITIES: tuple[Activity, ...] = tuple(Activity)


@dataclass(frozen=True)
class ActivityRanking:
    activity: Activity
    score: int  # nominally out of 100, not clamped
    reason: str
