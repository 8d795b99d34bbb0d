"""
Neon Yahtzee Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles dice rolling, holds, category scoring, bonuses and round progression.
"""

from src.engine.base import (
    ALL_CATEGORIES,
    LOWER_CATEGORIES,
    MAX_ROLLS,
    NUM_DICE,
    TOTAL_ROUNDS,
    UPPER_CATEGORIES,
    Die,
    GameState,
    ScoreCategory,
    Scorecard,
    Section,
)
from src.engine.game import YahtzeeEngine
from src.engine.ratings import ScoreRating, rate_final_score
from src.engine.scoring import ScoringEngine

__all__ = [
    # Data Classes
    "Die",
    "GameState",
    "Scorecard",
    "ScoreRating",
    # Enums
    "ScoreCategory",
    "Section",
    # Constants
    "ALL_CATEGORIES",
    "LOWER_CATEGORIES",
    "UPPER_CATEGORIES",
    "MAX_ROLLS",
    "NUM_DICE",
    "TOTAL_ROUNDS",
    # Engines
    "ScoringEngine",
    "YahtzeeEngine",
    "rate_final_score",
]
