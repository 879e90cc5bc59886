"""
Badge endpoints.

Stats are supplied by the caller in the request body; the response is
recomputed on every request and never stored.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from models.badge import BadgeCategory, BadgeTier
from schemas.badge import (
    BadgeDefinitionResponse,
    BadgeOverview,
    CountsSummary,
    EvaluatedBadge,
    StatsSnapshot,
)
from services import badge_service
from services.badge_service import BadgeNotFoundError

router = APIRouter()


@router.get("/definitions", response_model=list[BadgeDefinitionResponse])
async def list_definitions(
    category: Optional[BadgeCategory] = Query(None, description="Only badges in this category"),
) -> list[BadgeDefinitionResponse]:
    """List the badge catalog in display order."""
    return [
        badge_service.definition_to_schema(d)
        for d in badge_service.list_badge_definitions(category)
    ]


@router.get("/definitions/{badge_id}", response_model=BadgeDefinitionResponse)
async def get_definition(badge_id: str) -> BadgeDefinitionResponse:
    """Get a single badge from the catalog."""
    try:
        definition = badge_service.get_badge_definition(badge_id)
    except BadgeNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Badge '{badge_id}' not found",
        )
    return badge_service.definition_to_schema(definition)


@router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    """Badge categories in display order."""
    return [category.value for category in BadgeCategory]


@router.get("/tiers", response_model=list[str])
async def list_tiers() -> list[str]:
    """Badge tiers from lowest to highest."""
    return [tier.value for tier in BadgeTier]


@router.post("/evaluate", response_model=list[EvaluatedBadge])
async def evaluate_badges(
    stats: StatsSnapshot,
    category: Optional[BadgeCategory] = Query(None, description="Only badges in this category"),
) -> list[EvaluatedBadge]:
    """
    Evaluate every badge for the given stats.

    Pass `category` to get the same list filtered to one category.
    """
    return badge_service.filter_by_category(stats, category)


@router.post("/earned", response_model=list[EvaluatedBadge])
async def earned_badges(stats: StatsSnapshot) -> list[EvaluatedBadge]:
    """Badges the user has earned."""
    return badge_service.earned_only(stats)


@router.post("/summary", response_model=CountsSummary)
async def badge_summary(stats: StatsSnapshot) -> CountsSummary:
    """Earned / total counts with tier and category breakdowns."""
    return badge_service.counts_summary(stats)


@router.post("/by-category", response_model=dict[str, list[EvaluatedBadge]])
async def badges_by_category(stats: StatsSnapshot) -> dict[str, list[EvaluatedBadge]]:
    """All badges grouped by category."""
    return badge_service.grouped_by_category(stats)


@router.post("/next-goal", response_model=Optional[EvaluatedBadge])
async def next_goal(stats: StatsSnapshot) -> Optional[EvaluatedBadge]:
    """The unearned badge closest to completion, or null when all are earned."""
    return badge_service.next_goal(stats)


@router.post("/overview", response_model=BadgeOverview)
async def badge_overview(stats: StatsSnapshot) -> BadgeOverview:
    """Badges, counts and next goal in one response."""
    return badge_service.build_overview(stats)
