"""Schemas module initialization."""

from schemas.badge import (
    BadgeDefinitionResponse,
    BadgeOverview,
    BadgeProgress,
    CountsSummary,
    EvaluatedBadge,
    StatsSnapshot,
    TierCounts,
)

__all__ = [
    "StatsSnapshot",
    "BadgeProgress",
    "BadgeDefinitionResponse",
    "EvaluatedBadge",
    "TierCounts",
    "CountsSummary",
    "BadgeOverview",
]
