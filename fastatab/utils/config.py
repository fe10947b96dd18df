"""
Environment and configuration management.

This module provides centralized configuration loading for the fastatab
command-line tools. Values are read from environment variables, with a
.env file in the working directory taken into account.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CONTENT_DIGITS = 2
DEFAULT_LINE_LENGTH = 60


def _get_int(key: str, default: int) -> int:
    """Read a non-negative integer from the environment, falling back to default."""
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {key}={raw!r}: not an integer, using {default}")
        return default

    if value < 0:
        logger.warning(f"Ignoring {key}={raw!r}: must not be negative, using {default}")
        return default

    return value


@dataclass
class Settings:
    """
    Ambient settings for the fastatab tools.

    Attributes:
        log_level: Logging level name used when --verbose is not given
        content_digits: Decimals printed for GC and base content columns
        line_length: Default FASTA line width for tab2fasta
    """

    log_level: str = DEFAULT_LOG_LEVEL
    content_digits: int = DEFAULT_CONTENT_DIGITS
    line_length: int = DEFAULT_LINE_LENGTH

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Create a Settings instance from environment variables.

        Returns:
            Settings instance with values from environment
        """
        load_dotenv()

        return cls(
            log_level=os.getenv("FASTATAB_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            content_digits=_get_int("FASTATAB_CONTENT_DIGITS", DEFAULT_CONTENT_DIGITS),
            line_length=_get_int("FASTATAB_LINE_LENGTH", DEFAULT_LINE_LENGTH),
        )


# Module-level cached settings instance
_settings: Optional[Settings] = None


def load_settings(reload: bool = False) -> Settings:
    """
    Load settings from environment variables.

    This function caches the settings to avoid repeated
    environment lookups.

    Args:
        reload: Force reload of settings

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None or reload:
        _settings = Settings.from_env()
    return _settings
