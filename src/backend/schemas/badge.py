"""
Badge-related Pydantic schemas.
"""

import math
from typing import Any, Optional, Union

import structlog
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from models.badge import BadgeCategory, BadgeTier

logger = structlog.get_logger(__name__)

Number = Union[int, float]


def _stat(snake: str, camel: str) -> Any:
    """Optional numeric counter accepted under either naming convention."""
    return Field(default=0, validation_alias=AliasChoices(snake, camel))


def _to_number(value: Any) -> Optional[Number]:
    """Return value as an int/float, or None when it can't be read as one."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if isinstance(number, float):
        if not math.isfinite(number):
            return None
        if number.is_integer():
            return int(number)
    return number


class StatsSnapshot(BaseModel):
    """
    Activity counters for one user, as supplied by the stats provider.

    Every field is optional. Missing or malformed values fall back to
    zero / False / "" so that badge evaluation never fails on bad input.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    # Pins
    pins_created: Number = _stat("pins_created", "pinsCreated")
    pins_resolved: Number = _stat("pins_resolved", "pinsResolved")
    pins_with_50_upvotes: Number = _stat("pins_with_50_upvotes", "pinsWith50Upvotes")
    critical_pins: Number = _stat("critical_pins", "criticalPins")
    pins_with_images: Number = _stat("pins_with_images", "pinsWithImages")
    max_pins_in_city: Number = _stat("max_pins_in_city", "maxPinsInCity")
    cities_with_pins: Number = _stat("cities_with_pins", "citiesWithPins")

    # Community activity
    comments_made: Number = _stat("comments_made", "commentsMade")
    votes_cast: Number = _stat("votes_cast", "votesCast")
    verifications_made: Number = _stat("verifications_made", "verificationsMade")
    ngos_created: Number = _stat("ngos_created", "ngosCreated")
    events_created: Number = _stat("events_created", "eventsCreated")
    suggestions_made: Number = _stat("suggestions_made", "suggestionsMade")
    suggestions_implemented: Number = _stat("suggestions_implemented", "suggestionsImplemented")

    # Impact
    comments_with_10_likes: Number = _stat("comments_with_10_likes", "commentsWith10Likes")
    pins_with_10_comments: Number = _stat("pins_with_10_comments", "pinsWith10Comments")
    pins_with_10_saves: Number = _stat("pins_with_10_saves", "pinsWith10Saves")

    # Account
    current_streak: Number = _stat("current_streak", "currentStreak")
    account_age_days: Number = _stat("account_age_days", "accountAgeDays")
    total_points: Number = _stat("total_points", "totalPoints")
    weekly_rank: Number = _stat("weekly_rank", "weeklyRank")  # 0 = unranked
    email_verified: bool = Field(
        default=False, validation_alias=AliasChoices("email_verified", "emailVerified")
    )
    role: str = ""  # user, reviewer, ngo, admin

    @field_validator(
        "pins_created",
        "pins_resolved",
        "pins_with_50_upvotes",
        "critical_pins",
        "pins_with_images",
        "max_pins_in_city",
        "cities_with_pins",
        "comments_made",
        "votes_cast",
        "verifications_made",
        "ngos_created",
        "events_created",
        "suggestions_made",
        "suggestions_implemented",
        "comments_with_10_likes",
        "pins_with_10_comments",
        "pins_with_10_saves",
        "current_streak",
        "account_age_days",
        "total_points",
        "weekly_rank",
        mode="before",
    )
    @classmethod
    def coerce_counter(cls, v: Any, info: Any) -> Number:
        """Coerce a counter to a number, defaulting to 0."""
        if v is None:
            return 0
        number = _to_number(v)
        if number is None:
            logger.warning(
                "Malformed stats field, defaulting to 0",
                field=info.field_name,
                value_type=type(v).__name__,
            )
            return 0
        return number

    @field_validator("email_verified", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any) -> bool:
        """Read a flag by truthiness; strings must spell out a true value."""
        if isinstance(v, str):
            return v.strip().lower() in ("true", "1", "yes")
        if isinstance(v, float) and not math.isfinite(v):
            return False
        return bool(v)

    @field_validator("role", mode="before")
    @classmethod
    def coerce_role(cls, v: Any) -> str:
        """Roles are compared as lowercase strings; anything else is no role."""
        if v is None:
            return ""
        if not isinstance(v, str):
            logger.warning("Malformed stats field, defaulting to empty", field="role")
            return ""
        return v.strip().lower()


class BadgeProgress(BaseModel):
    """Progress toward a badge threshold."""

    current: Number
    max: Number
    percentage: int = Field(ge=0, le=100)


class BadgeDefinitionResponse(BaseModel):
    """Static catalog entry for a badge."""

    id: str
    name: str
    description: str
    icon: str
    category: BadgeCategory
    tier: BadgeTier
    criteria: int


class EvaluatedBadge(BadgeDefinitionResponse):
    """A badge evaluated against a stats snapshot."""

    earned: bool
    progress: BadgeProgress


class TierCounts(BaseModel):
    """Earned badge count per tier."""

    bronze: int = 0
    silver: int = 0
    gold: int = 0
    diamond: int = 0


class CountsSummary(BaseModel):
    """Earned vs. total badges with tier and category breakdowns."""

    earned: int
    total: int
    by_tier: TierCounts
    by_category: dict[str, int]


class BadgeOverview(BaseModel):
    """Everything the profile badge panel needs from a single evaluation."""

    badges: list[EvaluatedBadge]
    counts: CountsSummary
    next_goal: Optional[EvaluatedBadge] = None
