"""
payload_inference/Core/config.py
=================================
Library Configuration Module
=================================

This module defines the centralized configuration for the payload inference
library using Pydantic Settings. Parameters are loaded from environment
variables (optionally from a .env file via python-dotenv) and validated at
import time.

Configuration Categories:
------------------------
1. **Project Metadata**: Library name and version
2. **Location Policy**: Optional rules of the location inferrer

Environment Variables:
---------------------
Optional (with defaults):
    - LOCATION_HDOP_AS_ACCURACY: Use hdop/gps_hdop as accuracy proxy (default: False)

Usage Example:
-------------
    from payload_inference.Core.config import settings

    if settings.LOCATION_HDOP_AS_ACCURACY:
        print("HDOP values will fill Location.accuracy when no accuracy key exists")
"""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    """
    Library configuration settings with environment variable support.

    Settings are read-only after import; inferrers only read them, so they
    are safe to share across threads.
    """

    # ============================================================
    # PROJECT METADATA
    # ============================================================
    PROJECT_NAME: str = "payload-inference"
    """Library name identifier."""

    PROJECT_VERSION: str = "1.0.0"
    """Current library version following semantic versioning."""

    # ============================================================
    # LOCATION POLICY
    # ============================================================
    LOCATION_HDOP_AS_ACCURACY: bool = False
    """
    Treat horizontal dilution of precision as an accuracy proxy.

    When enabled, the flat-key location pass also reads `hdop` and
    `gps_hdop` (in that order) if none of `acc`, `accuracy` or `hacc`
    carries a number. HDOP is unitless, so this is off by default.

    Bounds validation of the inferred location is always applied and is
    intentionally not configurable.
    """

    class Config:
        """Pydantic configuration for settings management."""

        env_file = None
        """Environment variables are loaded explicitly with python-dotenv above."""

        case_sensitive = False
        """Both LOCATION_HDOP_AS_ACCURACY and location_hdop_as_accuracy are accepted."""


# ============================================================
# SETTINGS INSTANCE
# ============================================================
settings = Settings()
"""
Global settings instance.

Imported by the inferrers to resolve policy defaults. Validation occurs
immediately on import.
"""
