"""
Badge evaluation service.

Derives a user's badges from a stats snapshot. Nothing here is stored or
cached: every call re-evaluates the rule table against the snapshot it is
given, so two calls with equal input always return equal output.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional, Union

import structlog

from models.badge import BadgeCategory, BadgeDefinition, BadgeTier
from schemas.badge import (
    BadgeDefinitionResponse,
    BadgeOverview,
    BadgeProgress,
    CountsSummary,
    EvaluatedBadge,
    StatsSnapshot,
    TierCounts,
)
from services.badge_definitions import BADGE_DEFINITIONS, BADGES_BY_ID

logger = structlog.get_logger(__name__)

StatsInput = Union[StatsSnapshot, Mapping[str, Any], None]


class BadgeError(Exception):
    """Base exception for badge operations."""

    pass


class BadgeRuleError(BadgeError):
    """A rule table entry is broken (authoring defect, not bad input)."""

    pass


class BadgeNotFoundError(BadgeError):
    """No badge with the requested id exists."""

    pass


def to_snapshot(stats: StatsInput) -> StatsSnapshot:
    """Accept a snapshot, a raw provider mapping, or nothing at all."""
    if isinstance(stats, StatsSnapshot):
        return stats
    return StatsSnapshot.model_validate(stats or {})


def progress_percentage(current: float, maximum: float) -> int:
    """Completion percentage, rounded half up and clamped to [0, 100]."""
    # Clamp before dividing: huge counters overflow float division
    if current >= maximum:
        return 100
    if current <= 0:
        return 0
    percentage = math.floor(current / maximum * 100 + 0.5)
    return max(0, min(100, percentage))


def definition_to_schema(definition: BadgeDefinition) -> BadgeDefinitionResponse:
    """Static catalog view of a rule table entry."""
    return BadgeDefinitionResponse(
        id=definition.id,
        name=definition.name,
        description=definition.description,
        icon=definition.icon,
        category=definition.category,
        tier=definition.tier,
        criteria=definition.criteria,
    )


def evaluate_badge(definition: BadgeDefinition, snapshot: StatsSnapshot) -> EvaluatedBadge:
    """
    Evaluate a single definition against a snapshot.

    Raises BadgeRuleError if the progress rule fails or yields a
    non-positive max; a broken rule is never skipped silently.
    """
    try:
        current, maximum = definition.progress_fn(snapshot)
    except Exception as e:
        logger.error("Badge progress rule failed", badge_id=definition.id, error=str(e))
        raise BadgeRuleError(f"Progress rule for badge '{definition.id}' failed: {e}") from e

    if not maximum or maximum <= 0:
        logger.error("Badge progress rule has no positive max", badge_id=definition.id, max=maximum)
        raise BadgeRuleError(f"Badge '{definition.id}' has non-positive max {maximum!r}")

    return EvaluatedBadge(
        id=definition.id,
        name=definition.name,
        description=definition.description,
        icon=definition.icon,
        category=definition.category,
        tier=definition.tier,
        criteria=definition.criteria,
        earned=current >= maximum,
        progress=BadgeProgress(
            current=current,
            max=maximum,
            percentage=progress_percentage(current, maximum),
        ),
    )


def evaluate(
    stats: StatsInput = None,
    definitions: Sequence[BadgeDefinition] = BADGE_DEFINITIONS,
) -> list[EvaluatedBadge]:
    """
    Evaluate every badge for a stats snapshot.

    Returns one entry per definition, in rule table order.
    """
    snapshot = to_snapshot(stats)
    return [evaluate_badge(definition, snapshot) for definition in definitions]


def _evaluated(stats: StatsInput, badges: Optional[Sequence[EvaluatedBadge]]) -> Sequence[EvaluatedBadge]:
    """Reuse an already evaluated list when the caller has one."""
    return evaluate(stats) if badges is None else badges


def earned_only(
    stats: StatsInput = None, badges: Optional[Sequence[EvaluatedBadge]] = None
) -> list[EvaluatedBadge]:
    """Earned badges only, in rule table order."""
    return [badge for badge in _evaluated(stats, badges) if badge.earned]


def counts_summary(
    stats: StatsInput = None, badges: Optional[Sequence[EvaluatedBadge]] = None
) -> CountsSummary:
    """
    Count earned badges overall, per tier and per category.

    `total` is always the size of the rule table; every tier and every
    category appears in the breakdowns, with 0 when nothing is earned.
    """
    evaluated = _evaluated(stats, badges)
    earned = [badge for badge in evaluated if badge.earned]

    by_tier = {tier.value: 0 for tier in BadgeTier}
    by_category = {category.value: 0 for category in BadgeCategory}
    for badge in earned:
        by_tier[badge.tier.value] += 1
        by_category[badge.category.value] += 1

    return CountsSummary(
        earned=len(earned),
        total=len(evaluated),
        by_tier=TierCounts(**by_tier),
        by_category=by_category,
    )


def grouped_by_category(
    stats: StatsInput = None, badges: Optional[Sequence[EvaluatedBadge]] = None
) -> dict[str, list[EvaluatedBadge]]:
    """All badges grouped by category; empty categories map to []."""
    grouped: dict[str, list[EvaluatedBadge]] = {category.value: [] for category in BadgeCategory}
    for badge in _evaluated(stats, badges):
        grouped[badge.category.value].append(badge)
    return grouped


def filter_by_category(
    stats: StatsInput = None,
    category: Optional[BadgeCategory] = None,
    badges: Optional[Sequence[EvaluatedBadge]] = None,
) -> list[EvaluatedBadge]:
    """Badges of one category, or every badge when no category is given."""
    evaluated = _evaluated(stats, badges)
    if category is None:
        return list(evaluated)
    return [badge for badge in evaluated if badge.category == category]


def next_goal(
    stats: StatsInput = None, badges: Optional[Sequence[EvaluatedBadge]] = None
) -> Optional[EvaluatedBadge]:
    """
    The unearned badge closest to completion.

    Ties go to the badge that comes first in the rule table. Returns None
    when every badge has been earned.
    """
    unearned = [badge for badge in _evaluated(stats, badges) if not badge.earned]
    if not unearned:
        return None
    # sorted() is stable, so equal percentages keep table order
    return sorted(unearned, key=lambda b: b.progress.percentage, reverse=True)[0]


def build_overview(stats: StatsInput = None) -> BadgeOverview:
    """Badges, counts and next goal from a single evaluation pass."""
    badges = evaluate(stats)
    return BadgeOverview(
        badges=badges,
        counts=counts_summary(badges=badges),
        next_goal=next_goal(badges=badges),
    )


def get_badge_definition(badge_id: str) -> BadgeDefinition:
    """Look up a rule table entry by its id."""
    try:
        return BADGES_BY_ID[badge_id]
    except KeyError:
        raise BadgeNotFoundError(f"Unknown badge: {badge_id}") from None


def list_badge_definitions(category: Optional[BadgeCategory] = None) -> list[BadgeDefinition]:
    """Rule table entries, optionally limited to one category."""
    return [d for d in BADGE_DEFINITIONS if category is None or d.category == category]


def validate_rule_table(definitions: Iterable[BadgeDefinition] = BADGE_DEFINITIONS) -> int:
    """
    Check the rule table for authoring defects.

    Every id must be unique, every rule must produce a positive max for an
    empty snapshot, and `criteria` must match that max.

    Returns the number of definitions checked.
    """
    seen: set[str] = set()
    empty = StatsSnapshot()
    count = 0

    for definition in definitions:
        if definition.id in seen:
            raise BadgeRuleError(f"Duplicate badge id '{definition.id}'")
        seen.add(definition.id)

        badge = evaluate_badge(definition, empty)
        if badge.progress.max != definition.criteria:
            raise BadgeRuleError(
                f"Badge '{definition.id}' criteria {definition.criteria} "
                f"does not match progress max {badge.progress.max}"
            )
        count += 1

    return count
