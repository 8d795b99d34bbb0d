"""
Neon Yahtzee - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from src.engine.base import DIE_FACES, NUM_DICE, ScoreCategory


def validate_dice_values(
    values: Sequence[int],
    count: int = NUM_DICE,
) -> tuple[int, ...]:
    """
    Validate and normalize a full set of dice values.

    Args:
        values: Sequence of dice values to validate
        count: Exact number of dice required

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)

    if len(values_tuple) != count:
        raise ValueError(f"Exactly {count} dice required, got {len(values_tuple)}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_category(category: ScoreCategory | str) -> ScoreCategory:
    """
    Coerce a category name into a ScoreCategory.

    Accepts the enum itself or its string value (``"full_house"``).

    Raises:
        ValueError: If the name is not a known category
    """
    if isinstance(category, ScoreCategory):
        return category
    try:
        return ScoreCategory(category)
    except ValueError:
        raise ValueError(f"Unknown score category {category!r}.") from None


def validate_player_name(name: str, max_length: int = 30) -> str:
    """
    Validate and normalize a player name for the high-score table.

    Raises:
        ValueError: If the name is empty or too long
    """
    if not isinstance(name, str):
        raise ValueError(f"Player name must be a string, got {type(name).__name__}.")

    stripped = name.strip()
    if not stripped:
        raise ValueError("Player name cannot be empty.")

    if len(stripped) > max_length:
        raise ValueError(f"Player name must be at most {max_length} characters, got {len(stripped)}.")

    return stripped
