"""
Neon Yahtzee Persistence Layer.

High-score table backed by a local JSON file or Supabase.
"""

from src.database.high_scores import (
    MAX_HIGH_SCORES,
    HighScoreStore,
    JsonHighScoreStore,
    SupabaseHighScoreStore,
    get_high_score_store,
)
from src.database.models import HighScore

__all__ = [
    "MAX_HIGH_SCORES",
    "HighScore",
    "HighScoreStore",
    "JsonHighScoreStore",
    "SupabaseHighScoreStore",
    "get_high_score_store",
]
