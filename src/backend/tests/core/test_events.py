"""
Tests for application startup and shutdown handlers.
"""

from unittest.mock import MagicMock, patch

import pytest

from core.config import settings
from core.events import create_start_app_handler, create_stop_app_handler
from services.badge_service import BadgeRuleError


@pytest.mark.unit
class TestStartup:
    """Tests for the startup handler."""

    async def test_startup_validates_rule_table(self) -> None:
        """Test that startup checks the rule table."""
        with patch("core.events.validate_rule_table", return_value=53) as validate:
            await create_start_app_handler(MagicMock())()

        validate.assert_called_once_with()

    async def test_broken_rule_table_aborts_startup(self) -> None:
        """Test that an authoring defect stops the application from starting."""
        with patch(
            "core.events.validate_rule_table",
            side_effect=BadgeRuleError("Duplicate badge id 'voter'"),
        ):
            with pytest.raises(BadgeRuleError):
                await create_start_app_handler(MagicMock())()

    async def test_validation_can_be_skipped(self) -> None:
        """Test that the startup check honours its setting."""
        with patch.object(settings, "VALIDATE_BADGE_RULES_ON_STARTUP", False), patch(
            "core.events.validate_rule_table"
        ) as validate:
            await create_start_app_handler(MagicMock())()

        validate.assert_not_called()

    async def test_shutdown(self) -> None:
        """Test that shutdown completes without error."""
        await create_stop_app_handler(MagicMock())()
