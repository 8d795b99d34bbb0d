"""
Neon Yahtzee - Final Score Ratings

Maps a finished game's score to the message shown on the results screen.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreRating:
    """
    Results-screen message for a final score.

    Attributes:
        text: Headline shown above the score
        tone: Theme color key (``accent``, ``success``, ``primary``,
              ``secondary`` or ``muted``)
    """
    text: str
    tone: str


# Checked top-down; first threshold reached wins.
_RATING_THRESHOLDS: tuple[tuple[int, ScoreRating], ...] = (
    (300, ScoreRating("LEGENDARY!", "accent")),
    (250, ScoreRating("AMAZING!", "success")),
    (200, ScoreRating("GREAT GAME!", "primary")),
    (150, ScoreRating("WELL DONE!", "primary")),
    (100, ScoreRating("GOOD EFFORT!", "secondary")),
)

NEW_HIGH_SCORE = ScoreRating("NEW HIGH SCORE!", "accent")
KEEP_TRYING = ScoreRating("KEEP TRYING!", "muted")


def rate_final_score(score: int, is_new_high_score: bool = False) -> ScoreRating:
    """Pick the results headline for ``score``."""
    if is_new_high_score:
        return NEW_HIGH_SCORE
    for threshold, rating in _RATING_THRESHOLDS:
        if score >= threshold:
            return rating
    return KEEP_TRYING
