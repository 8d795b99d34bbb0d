"""
Neon Yahtzee - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Any, Callable

import pytest

from src.engine.base import ALL_CATEGORIES, Die, GameState, ScoreCategory, Scorecard


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def category_scores() -> dict[str, tuple[tuple[int, ...], ScoreCategory, int]]:
    """
    Dice patterns with the expected score in one category.

    Returns:
        Dict mapping name to (dice_values, category, expected_points)
    """
    return {
        # Upper section
        "ones_all": ((1, 1, 1, 1, 1), ScoreCategory.ONES, 5),
        "twos_pair": ((2, 2, 3, 4, 5), ScoreCategory.TWOS, 4),
        "threes_none": ((1, 2, 4, 5, 6), ScoreCategory.THREES, 0),
        "fours_triple": ((4, 4, 4, 1, 2), ScoreCategory.FOURS, 12),
        "fives_single": ((5, 1, 2, 3, 4), ScoreCategory.FIVES, 5),
        "sixes_four": ((6, 6, 6, 6, 1), ScoreCategory.SIXES, 24),

        # Of a kind
        "three_kind": ((3, 3, 3, 2, 2), ScoreCategory.THREE_OF_A_KIND, 13),
        "three_kind_from_four": ((5, 5, 5, 5, 2), ScoreCategory.THREE_OF_A_KIND, 22),
        "three_kind_miss": ((1, 1, 2, 2, 3), ScoreCategory.THREE_OF_A_KIND, 0),
        "four_kind": ((6, 6, 6, 6, 1), ScoreCategory.FOUR_OF_A_KIND, 25),
        "four_kind_from_five": ((2, 2, 2, 2, 2), ScoreCategory.FOUR_OF_A_KIND, 10),
        "four_kind_miss": ((6, 6, 6, 1, 1), ScoreCategory.FOUR_OF_A_KIND, 0),

        # Fixed-value combinations
        "full_house": ((3, 3, 3, 2, 2), ScoreCategory.FULL_HOUSE, 25),
        "full_house_shuffled": ((2, 5, 2, 5, 5), ScoreCategory.FULL_HOUSE, 25),
        "full_house_five_kind": ((1, 1, 1, 1, 1), ScoreCategory.FULL_HOUSE, 0),
        "full_house_two_pair": ((1, 1, 2, 2, 3), ScoreCategory.FULL_HOUSE, 0),
        "small_low": ((1, 2, 3, 4, 6), ScoreCategory.SMALL_STRAIGHT, 30),
        "small_mid_dupe": ((2, 3, 3, 4, 5), ScoreCategory.SMALL_STRAIGHT, 30),
        "small_high": ((6, 4, 3, 5, 1), ScoreCategory.SMALL_STRAIGHT, 30),
        "small_from_large": ((2, 3, 4, 5, 6), ScoreCategory.SMALL_STRAIGHT, 30),
        "small_miss": ((1, 2, 3, 5, 6), ScoreCategory.SMALL_STRAIGHT, 0),
        "large_low": ((1, 2, 3, 4, 5), ScoreCategory.LARGE_STRAIGHT, 40),
        "large_high": ((2, 3, 4, 5, 6), ScoreCategory.LARGE_STRAIGHT, 40),
        "large_shuffled": ((5, 3, 1, 4, 2), ScoreCategory.LARGE_STRAIGHT, 40),
        "large_miss_small": ((1, 2, 3, 4, 4), ScoreCategory.LARGE_STRAIGHT, 0),
        "large_miss_gap": ((1, 2, 3, 5, 6), ScoreCategory.LARGE_STRAIGHT, 0),
        "yahtzee": ((4, 4, 4, 4, 4), ScoreCategory.YAHTZEE, 50),
        "yahtzee_miss": ((4, 4, 4, 4, 3), ScoreCategory.YAHTZEE, 0),
        "chance": ((2, 3, 4, 5, 6), ScoreCategory.CHANCE, 20),
        "chance_low": ((1, 1, 1, 1, 2), ScoreCategory.CHANCE, 6),
    }


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

def _dice(values: tuple[int, ...], held: frozenset[int] = frozenset()) -> tuple[Die, ...]:
    return tuple(Die(id=i, value=v, is_held=i in held) for i, v in enumerate(values))


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """
    Factory for game states with chosen dice and scorecard.

    Defaults to a state where one roll has been made this round.
    """
    def _make(
        values: tuple[int, ...] = (1, 1, 1, 1, 1),
        *,
        held: frozenset[int] = frozenset(),
        rolls_left: int = 2,
        current_round: int = 1,
        scores: dict[ScoreCategory, int] | None = None,
        yahtzee_bonus: int = 0,
    ) -> GameState:
        scorecard = Scorecard()
        for category, points in (scores or {}).items():
            scorecard = scorecard.with_score(category, points)
        return GameState(
            dice=_dice(values, held),
            rolls_left=rolls_left,
            current_round=current_round,
            scorecard=scorecard,
            yahtzee_bonus=yahtzee_bonus,
        )

    return _make


@pytest.fixture
def almost_complete_state(make_state) -> GameState:
    """Round 13 with only Chance open, dice already rolled."""
    scores = {c: 0 for c in ALL_CATEGORIES if c is not ScoreCategory.CHANCE}
    return make_state((6, 6, 5, 5, 4), rolls_left=1, current_round=13, scores=scores)


# =============================================================================
# TIMER FIXTURES
# =============================================================================

class FakeTimer:
    """Stand-in for ``threading.Timer`` that fires only when told to."""

    def __init__(self, interval: float, function: Callable[..., Any], args: list[Any]) -> None:
        self.interval = interval
        self.function = function
        self.args = args
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        """Run the callback as the real timer thread would."""
        if not self.cancelled:
            self.function(*self.args)


@pytest.fixture
def timers() -> list[FakeTimer]:
    """Every FakeTimer created by :func:`timer_factory`, in order."""
    return []


@pytest.fixture
def timer_factory(timers) -> Callable[..., FakeTimer]:
    def _factory(interval: float, function: Callable[..., Any], args: list[Any]) -> FakeTimer:
        timer = FakeTimer(interval, function, args)
        timers.append(timer)
        return timer

    return _factory
