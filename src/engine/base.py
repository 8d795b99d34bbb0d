"""
Neon Yahtzee - Game Engine Base Classes

This module defines the foundational data structures, enums and rule
constants used throughout the game engine. All classes are immutable
(frozen dataclasses) so that every transition produces a fresh snapshot.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Sequence


# Dice
NUM_DICE = 5
DIE_FACES = 6
MAX_ROLLS = 3
TOTAL_ROUNDS = 13

# Upper section bonus
UPPER_BONUS_THRESHOLD = 63
UPPER_BONUS_POINTS = 35

# Fixed category values
FULL_HOUSE_POINTS = 25
SMALL_STRAIGHT_POINTS = 30
LARGE_STRAIGHT_POINTS = 40
YAHTZEE_POINTS = 50
YAHTZEE_BONUS_POINTS = 100


class Section(Enum):
    """Scorecard section a category belongs to."""
    UPPER = "upper"
    LOWER = "lower"


class ScoreCategory(Enum):
    """The thirteen boxes of a Yahtzee scorecard."""
    ONES = "ones"
    TWOS = "twos"
    THREES = "threes"
    FOURS = "fours"
    FIVES = "fives"
    SIXES = "sixes"
    THREE_OF_A_KIND = "three_of_a_kind"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    SMALL_STRAIGHT = "small_straight"
    LARGE_STRAIGHT = "large_straight"
    YAHTZEE = "yahtzee"
    CHANCE = "chance"

    @property
    def section(self) -> Section:
        return Section.UPPER if self in UPPER_CATEGORIES else Section.LOWER

    @property
    def is_upper(self) -> bool:
        return self.section is Section.UPPER

    @property
    def face_value(self) -> int | None:
        """Die face counted by an upper category, ``None`` for lower ones."""
        if not self.is_upper:
            return None
        return UPPER_CATEGORIES.index(self) + 1

    @property
    def label(self) -> str:
        return _CATEGORY_INFO[self][0]

    @property
    def description(self) -> str:
        return _CATEGORY_INFO[self][1]


UPPER_CATEGORIES: tuple[ScoreCategory, ...] = (
    ScoreCategory.ONES,
    ScoreCategory.TWOS,
    ScoreCategory.THREES,
    ScoreCategory.FOURS,
    ScoreCategory.FIVES,
    ScoreCategory.SIXES,
)

LOWER_CATEGORIES: tuple[ScoreCategory, ...] = (
    ScoreCategory.THREE_OF_A_KIND,
    ScoreCategory.FOUR_OF_A_KIND,
    ScoreCategory.FULL_HOUSE,
    ScoreCategory.SMALL_STRAIGHT,
    ScoreCategory.LARGE_STRAIGHT,
    ScoreCategory.YAHTZEE,
    ScoreCategory.CHANCE,
)

ALL_CATEGORIES: tuple[ScoreCategory, ...] = UPPER_CATEGORIES + LOWER_CATEGORIES

_CATEGORY_INFO: dict[ScoreCategory, tuple[str, str]] = {
    ScoreCategory.ONES: ("Ones", "Sum of all ones"),
    ScoreCategory.TWOS: ("Twos", "Sum of all twos"),
    ScoreCategory.THREES: ("Threes", "Sum of all threes"),
    ScoreCategory.FOURS: ("Fours", "Sum of all fours"),
    ScoreCategory.FIVES: ("Fives", "Sum of all fives"),
    ScoreCategory.SIXES: ("Sixes", "Sum of all sixes"),
    ScoreCategory.THREE_OF_A_KIND: ("Three of a Kind", "Sum of all dice"),
    ScoreCategory.FOUR_OF_A_KIND: ("Four of a Kind", "Sum of all dice"),
    ScoreCategory.FULL_HOUSE: ("Full House", f"{FULL_HOUSE_POINTS} points"),
    ScoreCategory.SMALL_STRAIGHT: ("Small Straight", f"{SMALL_STRAIGHT_POINTS} points"),
    ScoreCategory.LARGE_STRAIGHT: ("Large Straight", f"{LARGE_STRAIGHT_POINTS} points"),
    ScoreCategory.YAHTZEE: ("Yahtzee", f"{YAHTZEE_POINTS} points"),
    ScoreCategory.CHANCE: ("Chance", "Sum of all dice"),
}


@dataclass(frozen=True)
class Die:
    """
    A single die on the table.

    Attributes:
        id: Stable identity (0-4), never changes during a session
        value: Face value (1-6)
        is_held: Whether the die is kept out of the next roll
    """
    id: int
    value: int = 1
    is_held: bool = False

    def __post_init__(self) -> None:
        """Validate die identity and face value."""
        if not (0 <= self.id < NUM_DICE):
            raise ValueError(f"Invalid die id {self.id}. Must be between 0 and {NUM_DICE - 1}.")
        if not (1 <= self.value <= DIE_FACES):
            raise ValueError(
                f"Invalid die value {self.value}. Must be between 1 and {DIE_FACES}."
            )

    def with_value(self, value: int) -> "Die":
        return replace(self, value=value)

    def toggled(self) -> "Die":
        return replace(self, is_held=not self.is_held)

    def released(self) -> "Die":
        return replace(self, is_held=False)


@dataclass(frozen=True)
class Scorecard:
    """
    Immutable, write-once scorecard.

    Scores are stored in ``ALL_CATEGORIES`` order. ``None`` marks a box
    that has not been filled yet; ``0`` is a banked zero.

    Attributes:
        scores: One entry per category
    """
    scores: tuple[int | None, ...] = field(
        default_factory=lambda: (None,) * len(ALL_CATEGORIES)
    )

    def __post_init__(self) -> None:
        """Validate scorecard shape and values."""
        if len(self.scores) != len(ALL_CATEGORIES):
            raise ValueError(
                f"Scorecard must have {len(ALL_CATEGORIES)} entries, got {len(self.scores)}."
            )
        for category, score in zip(ALL_CATEGORIES, self.scores):
            if score is not None and score < 0:
                raise ValueError(f"Score for {category.value} cannot be negative, got {score}.")

    def __getitem__(self, category: ScoreCategory) -> int | None:
        return self.scores[ALL_CATEGORIES.index(category)]

    def __iter__(self):
        return iter(ALL_CATEGORIES)

    def __len__(self) -> int:
        return len(ALL_CATEGORIES)

    def items(self) -> list[tuple[ScoreCategory, int | None]]:
        return list(zip(ALL_CATEGORIES, self.scores))

    def is_filled(self, category: ScoreCategory) -> bool:
        return self[category] is not None

    @property
    def filled_count(self) -> int:
        return sum(1 for score in self.scores if score is not None)

    @property
    def open_categories(self) -> tuple[ScoreCategory, ...]:
        return tuple(c for c, score in self.items() if score is None)

    def with_score(self, category: ScoreCategory, score: int) -> "Scorecard":
        """
        Return a new scorecard with ``category`` filled.

        Raises:
            ValueError: If the category already holds a score
        """
        if self.is_filled(category):
            raise ValueError(f"Category {category.value} already scored.")
        scores = list(self.scores)
        scores[ALL_CATEGORIES.index(category)] = score
        return Scorecard(scores=tuple(scores))


def _initial_dice() -> tuple[Die, ...]:
    return tuple(Die(id=i) for i in range(NUM_DICE))


@dataclass(frozen=True)
class GameState:
    """
    Complete snapshot of a single-player game.

    Attributes:
        dice: The five dice, ordered by id
        rolls_left: Rolls remaining in the current round (0-3)
        current_round: Round counter (1-13), never advances past 13
        scorecard: Write-once scorecard
        yahtzee_bonus: Accumulated Yahtzee bonus (multiple of 100)
        is_game_over: True once all thirteen categories are filled
    """
    dice: tuple[Die, ...] = field(default_factory=_initial_dice)
    rolls_left: int = MAX_ROLLS
    current_round: int = 1
    scorecard: Scorecard = field(default_factory=Scorecard)
    yahtzee_bonus: int = 0
    is_game_over: bool = False

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if len(self.dice) != NUM_DICE:
            raise ValueError(f"Game state needs exactly {NUM_DICE} dice, got {len(self.dice)}.")
        if [d.id for d in self.dice] != list(range(NUM_DICE)):
            raise ValueError("Dice must be ordered by id 0-4.")
        if not (0 <= self.rolls_left <= MAX_ROLLS):
            raise ValueError(f"rolls_left must be between 0 and {MAX_ROLLS}, got {self.rolls_left}.")
        if not (1 <= self.current_round <= TOTAL_ROUNDS):
            raise ValueError(
                f"current_round must be between 1 and {TOTAL_ROUNDS}, got {self.current_round}."
            )
        if self.yahtzee_bonus < 0 or self.yahtzee_bonus % YAHTZEE_BONUS_POINTS:
            raise ValueError(
                f"yahtzee_bonus must be a non-negative multiple of {YAHTZEE_BONUS_POINTS}."
            )

    @classmethod
    def initial(cls) -> "GameState":
        """Fresh state for a new game."""
        return cls()

    @property
    def values(self) -> tuple[int, ...]:
        return tuple(d.value for d in self.dice)

    @property
    def held_ids(self) -> frozenset[int]:
        return frozenset(d.id for d in self.dice if d.is_held)

    @property
    def has_rolled(self) -> bool:
        """True once at least one roll has been made this round."""
        return self.rolls_left < MAX_ROLLS

    @property
    def display_round(self) -> int:
        return min(self.current_round, TOTAL_ROUNDS)


def dice_values(dice: Sequence[Die] | Sequence[int] | GameState) -> tuple[int, ...]:
    """Normalize dice, die values or a game state into a tuple of ints."""
    if isinstance(dice, GameState):
        return dice.values
    return tuple(d.value if isinstance(d, Die) else d for d in dice)
