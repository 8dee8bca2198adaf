# fitsynth/config.py
"""
FitSynth — Configuration
========================
Environment-driven settings. A local `.env` file is loaded first so the
Gemini key and log level can live next to the project.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# =============================================================================
# CONFIGURATION
# =============================================================================
load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_DATA_DIR = os.path.join(BASE_DIR, "data")
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from environment variables."""
    log_level: str = DEFAULT_LOG_LEVEL
    google_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    data_dir: str = DEFAULT_DATA_DIR

    @property
    def gemini_enabled(self) -> bool:
        return bool(self.google_api_key)


def get_settings() -> Settings:
    """Build a Settings snapshot from the current environment."""
    return Settings(
        log_level=os.environ.get("FITSYNTH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        google_api_key=os.environ.get("GOOGLE_API_KEY") or None,
        gemini_model=os.environ.get("FITSYNTH_GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        data_dir=os.environ.get("FITSYNTH_DATA_DIR", DEFAULT_DATA_DIR),
    )


__all__ = ["Settings", "get_settings", "DEFAULT_DATA_DIR", "DEFAULT_GEMINI_MODEL"]
