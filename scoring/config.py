# scoring/config.py
"""
PlayerFuel — Configuration
==========================
Process-wide settings read once from the environment (and an optional .env
file) at import. The resulting object is frozen.
"""

import os

from pydantic import BaseModel, ConfigDict, Field
from dotenv import load_dotenv

# =============================================================================
# CONFIGURATION
# =============================================================================
load_dotenv()

TRUE_VALUES = {"1", "true", "yes", "on"}


class ScoringSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    strict_tags: bool = False
    api_host: str = "0.0.0.0"
    api_port: int = Field(8000, ge=1, le=65535)


def load_settings() -> ScoringSettings:
    """Build settings from PLAYERFUEL_* environment variables."""
    return ScoringSettings(
        strict_tags=os.environ.get("PLAYERFUEL_STRICT_TAGS", "").strip().lower() in TRUE_VALUES,
        api_host=os.environ.get("PLAYERFUEL_API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("PLAYERFUEL_API_PORT", "8000")),
    )


SETTINGS = load_settings()


__all__ = ["ScoringSettings", "load_settings", "SETTINGS"]
