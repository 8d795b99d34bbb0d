"""
Neon Yahtzee - Scoring Engine

Pure scoring rules for five dice and the thirteen scorecard categories.

Scoring Rules:
- Upper section (Ones-Sixes): sum of the dice showing that face
- Three/Four of a Kind: sum of all dice when the condition holds
- Full House: exactly three of one face and two of another (25)
- Small Straight: four consecutive faces (30)
- Large Straight: five consecutive faces (40)
- Yahtzee: all five dice match (50)
- Chance: sum of all dice
- Upper bonus: 35 points once the upper section reaches 63

All methods are stateless class methods. Dice may be passed as ``Die``
objects or as plain face values.
"""

from collections import Counter
from typing import ClassVar, Sequence

from src.engine.base import (
    ALL_CATEGORIES,
    FULL_HOUSE_POINTS,
    LARGE_STRAIGHT_POINTS,
    LOWER_CATEGORIES,
    SMALL_STRAIGHT_POINTS,
    UPPER_BONUS_POINTS,
    UPPER_BONUS_THRESHOLD,
    UPPER_CATEGORIES,
    YAHTZEE_POINTS,
    Die,
    ScoreCategory,
    Scorecard,
    dice_values,
)

Dice = Sequence[Die] | Sequence[int]


class ScoringEngine:
    """Stateless engine for Yahtzee scoring."""

    SMALL_STRAIGHTS: ClassVar[tuple[frozenset[int], ...]] = (
        frozenset({1, 2, 3, 4}),
        frozenset({2, 3, 4, 5}),
        frozenset({3, 4, 5, 6}),
    )
    LARGE_STRAIGHTS: ClassVar[tuple[frozenset[int], ...]] = (
        frozenset({1, 2, 3, 4, 5}),
        frozenset({2, 3, 4, 5, 6}),
    )

    # === Dice patterns ===

    @classmethod
    def sum_of_value(cls, dice: Dice, value: int) -> int:
        """Sum of the dice showing ``value``."""
        return sum(v for v in dice_values(dice) if v == value)

    @classmethod
    def sum_all_dice(cls, dice: Dice) -> int:
        return sum(dice_values(dice))

    @classmethod
    def has_n_of_a_kind(cls, dice: Dice, n: int) -> bool:
        """True if some face value appears on at least ``n`` dice."""
        counts = Counter(dice_values(dice))
        return any(count >= n for count in counts.values())

    @classmethod
    def is_full_house(cls, dice: Dice) -> bool:
        """
        Check for three of one face plus two of another.

        Five of a kind is not a full house: its counts are {5}, not {3, 2}.
        """
        counts = sorted(Counter(dice_values(dice)).values())
        return counts == [2, 3]

    @classmethod
    def is_small_straight(cls, dice: Dice) -> bool:
        faces = set(dice_values(dice))
        return any(straight <= faces for straight in cls.SMALL_STRAIGHTS)

    @classmethod
    def is_large_straight(cls, dice: Dice) -> bool:
        faces = frozenset(dice_values(dice))
        return len(faces) == 5 and faces in cls.LARGE_STRAIGHTS

    @classmethod
    def is_yahtzee(cls, dice: Dice) -> bool:
        return cls.has_n_of_a_kind(dice, 5)

    # === Category scoring ===

    @classmethod
    def calculate_potential_score(cls, dice: Dice, category: ScoreCategory) -> int:
        """
        Points ``dice`` would bank in ``category``.

        Args:
            dice: Five dice or face values
            category: Category to evaluate

        Returns:
            Non-negative point value

        Raises:
            ValueError: If ``category`` is not a ScoreCategory
        """
        if category in UPPER_CATEGORIES:
            return cls.sum_of_value(dice, category.face_value)

        if category is ScoreCategory.THREE_OF_A_KIND:
            return cls.sum_all_dice(dice) if cls.has_n_of_a_kind(dice, 3) else 0
        if category is ScoreCategory.FOUR_OF_A_KIND:
            return cls.sum_all_dice(dice) if cls.has_n_of_a_kind(dice, 4) else 0
        if category is ScoreCategory.FULL_HOUSE:
            return FULL_HOUSE_POINTS if cls.is_full_house(dice) else 0
        if category is ScoreCategory.SMALL_STRAIGHT:
            return SMALL_STRAIGHT_POINTS if cls.is_small_straight(dice) else 0
        if category is ScoreCategory.LARGE_STRAIGHT:
            return LARGE_STRAIGHT_POINTS if cls.is_large_straight(dice) else 0
        if category is ScoreCategory.YAHTZEE:
            return YAHTZEE_POINTS if cls.is_yahtzee(dice) else 0
        if category is ScoreCategory.CHANCE:
            return cls.sum_all_dice(dice)

        raise ValueError(f"Unknown score category {category!r}.")

    @classmethod
    def calculate_all_potential_scores(cls, dice: Dice) -> dict[ScoreCategory, int]:
        """Preview of every category for the current dice."""
        return {c: cls.calculate_potential_score(dice, c) for c in ALL_CATEGORIES}

    # === Scorecard totals ===

    @classmethod
    def calculate_upper_total(cls, scorecard: Scorecard) -> int:
        return sum(scorecard[c] or 0 for c in UPPER_CATEGORIES)

    @classmethod
    def calculate_upper_bonus(cls, scorecard: Scorecard) -> int:
        if cls.calculate_upper_total(scorecard) >= UPPER_BONUS_THRESHOLD:
            return UPPER_BONUS_POINTS
        return 0

    @classmethod
    def calculate_lower_total(cls, scorecard: Scorecard) -> int:
        return sum(scorecard[c] or 0 for c in LOWER_CATEGORIES)

    @classmethod
    def calculate_grand_total(cls, scorecard: Scorecard, yahtzee_bonus: int = 0) -> int:
        """Upper total + upper bonus + lower total + Yahtzee bonus."""
        return (
            cls.calculate_upper_total(scorecard)
            + cls.calculate_upper_bonus(scorecard)
            + cls.calculate_lower_total(scorecard)
            + yahtzee_bonus
        )

    @classmethod
    def is_scorecard_complete(cls, scorecard: Scorecard) -> bool:
        return all(scorecard[c] is not None for c in ALL_CATEGORIES)
