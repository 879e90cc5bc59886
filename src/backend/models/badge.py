"""
Badge vocabulary and rule record.

Badges are never stored. A BadgeDefinition pairs static display metadata
with a pure progress rule; earned state is re-derived from the latest
stats snapshot on every evaluation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, NamedTuple, Union

if TYPE_CHECKING:
    from schemas.badge import StatsSnapshot


class BadgeTier(str, Enum):
    """Cosmetic prestige rank of a badge."""

    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    DIAMOND = "diamond"


class BadgeCategory(str, Enum):
    """Grouping label shown as a filter on the profile page."""

    PINS = "Pins"
    ENGAGEMENT = "Engagement"
    VOTING = "Voting"
    VERIFICATION = "Verification"
    NGO_EVENTS = "NGO & Events"
    SUGGESTIONS = "Suggestions"
    STREAK = "Streak"
    SPECIAL = "Special"
    ROLE = "Role"
    LEADERBOARD = "Leaderboard"
    MILESTONE = "Milestone"
    IMPACT = "Impact"


class Progress(NamedTuple):
    """Raw progress toward a badge threshold."""

    current: Union[int, float]
    max: Union[int, float]


ProgressFn = Callable[["StatsSnapshot"], Progress]


@dataclass(frozen=True)
class BadgeDefinition:
    """A single entry of the badge rule table."""

    id: str
    name: str
    description: str
    icon: str
    category: BadgeCategory
    tier: BadgeTier
    criteria: int  # documents the threshold; progress_fn supplies the authoritative max
    progress_fn: ProgressFn
