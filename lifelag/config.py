"""
Life Lag application settings.

Extends the base settings with check-in specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Life Lag specific settings."""

    # ==========================================================================
    # Check-in Settings
    # ==========================================================================
    # Prior check-ins read on submission (trend, continuity, adaptive tips)
    RECENT_CHECKINS_WINDOW: int = 5

    # Max check-ins returned by the history endpoint
    HISTORY_MAX_LIMIT: int = 52


# Global settings instance
settings = Settings()
