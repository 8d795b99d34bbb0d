"""
Neon Yahtzee - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

_SECRET_KEYS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "DEBUG",
    "LOG_LEVEL",
    "ENABLE_SOUNDS",
    "HIGH_SCORE_BACKEND",
)

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets.toml outside Streamlit Cloud
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    player_name: str = Field(default="Player", max_length=30)

    # Gameplay presentation
    roll_animation_seconds: float = Field(default=0.4, ge=0)

    # Audio
    enable_sounds: bool = True

    # High scores
    high_score_backend: Literal["local", "supabase"] = "local"
    high_scores_path: Path = Path("~/.neon_yahtzee/high_scores.json")
    max_high_scores: int = Field(default=10, ge=1)

    # Supabase (only for the "supabase" high-score backend)
    supabase_url: str | None = None
    supabase_anon_key: str | None = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _check_backend_credentials(self) -> "Settings":
        if self.high_score_backend == "supabase" and not (
            self.supabase_url and self.supabase_anon_key
        ):
            raise ValueError(
                "SUPABASE_URL and SUPABASE_ANON_KEY are required for the supabase high-score backend."
            )
        return self

    @property
    def resolved_high_scores_path(self) -> Path:
        return self.high_scores_path.expanduser()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings. Safe to call on every rerun."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_LOG_FORMAT)
    root.setLevel(level)
