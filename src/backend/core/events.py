"""
Application lifecycle event handlers.

Checks the badge rule table on startup so that an authoring defect stops
the service before it can serve wrong badges.
"""

from typing import Callable

import structlog
from fastapi import FastAPI

from core.config import settings
from services.badge_service import validate_rule_table

logger = structlog.get_logger(__name__)


def create_start_app_handler(app: FastAPI) -> Callable:
    """Create startup event handler."""

    async def start_app() -> None:
        logger.info(f"Starting {settings.APP_NAME} API...", env=settings.APP_ENV)

        if settings.VALIDATE_BADGE_RULES_ON_STARTUP:
            # Let BadgeRuleError propagate: a broken rule table is fatal
            checked = validate_rule_table()
            logger.info("Badge rule table validated", badges=checked)

        if not settings.ENABLE_GAMIFICATION:
            logger.warning("Gamification disabled, badge endpoints are not mounted")

        logger.info(f"{settings.APP_NAME} API started successfully")

    return start_app


def create_stop_app_handler(app: FastAPI) -> Callable:
    """Create shutdown event handler."""

    async def stop_app() -> None:
        logger.info(f"{settings.APP_NAME} API shutdown complete")

    return stop_app
