"""Badge domain models."""

from models.badge import BadgeCategory, BadgeDefinition, BadgeTier, Progress

__all__ = [
    "BadgeCategory",
    "BadgeDefinition",
    "BadgeTier",
    "Progress",
]
