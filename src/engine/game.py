"""
Neon Yahtzee - Game State Machine

Turn and round rules for a single-player game of Yahtzee.

Game Rules:
- 13 rounds, one category scored per round
- Up to 3 rolls per round; held dice are kept out of a roll
- Dice can only be held after the first roll of a round
- A category can only be scored after at least one roll
- Every category is write-once; a banked zero is still banked
- Rolling another Yahtzee after the Yahtzee box holds 50 earns +100,
  whichever category the dice are scored in

All methods are stateless class methods operating on immutable data.
Illegal transitions return the input state unchanged.
"""

import logging
import random
from dataclasses import replace
from typing import ClassVar, Sequence

from src.engine.base import (
    DIE_FACES,
    MAX_ROLLS,
    NUM_DICE,
    YAHTZEE_BONUS_POINTS,
    YAHTZEE_POINTS,
    GameState,
    ScoreCategory,
)
from src.engine.scoring import ScoringEngine
from src.engine.validators import validate_dice_values

logger = logging.getLogger(__name__)


class YahtzeeEngine:
    """
    Stateless engine for Yahtzee turn and round progression.

    State is passed in and returned, never stored.
    """

    NUM_DICE: ClassVar[int] = NUM_DICE
    MAX_ROLLS: ClassVar[int] = MAX_ROLLS

    @classmethod
    def new_game(cls) -> GameState:
        return GameState.initial()

    @classmethod
    def roll_die(cls) -> int:
        """Roll a single D6."""
        return random.randint(1, DIE_FACES)

    # === Preconditions ===

    @classmethod
    def can_roll(cls, state: GameState) -> bool:
        return state.rolls_left > 0 and not state.is_game_over

    @classmethod
    def can_hold(cls, state: GameState) -> bool:
        """Holding is only allowed once the round's first roll is made."""
        return state.has_rolled and not state.is_game_over

    @classmethod
    def can_score(cls, state: GameState, category: ScoreCategory) -> bool:
        return (
            not state.is_game_over
            and state.has_rolled
            and state.scorecard[category] is None
        )

    # === Transitions ===

    @classmethod
    def roll(
        cls,
        state: GameState,
        rolled: Sequence[int] | None = None,
    ) -> GameState:
        """
        Re-roll every unheld die and consume one roll.

        Args:
            state: Current game state
            rolled: Optional pre-determined five values (for testing); only
                the positions of unheld dice are used

        Returns:
            New state, or ``state`` itself when no rolls are left
        """
        if not cls.can_roll(state):
            return state

        if rolled is None:
            rolled = tuple(cls.roll_die() for _ in range(cls.NUM_DICE))
        else:
            rolled = validate_dice_values(rolled, count=cls.NUM_DICE)

        dice = tuple(
            die if die.is_held else die.with_value(value)
            for die, value in zip(state.dice, rolled)
        )
        new_state = replace(state, dice=dice, rolls_left=state.rolls_left - 1)
        logger.debug(
            "Rolled %s (held %s), %d rolls left",
            new_state.values, sorted(state.held_ids), new_state.rolls_left,
        )
        return new_state

    @classmethod
    def toggle_hold(cls, state: GameState, die_id: int) -> GameState:
        """Flip the held flag of one die."""
        if not cls.can_hold(state):
            return state
        if not (0 <= die_id < cls.NUM_DICE):
            return state

        dice = tuple(die.toggled() if die.id == die_id else die for die in state.dice)
        return replace(state, dice=dice)

    @classmethod
    def score_category(cls, state: GameState, category: ScoreCategory) -> GameState:
        """
        Bank the current dice in ``category`` and advance the round.

        Steps:
        1. Compute the category score from the dice
        2. Award the Yahtzee bonus when a further Yahtzee is rolled
        3. Write the score (write-once)
        4. Advance the round unless the scorecard is complete
        5. Reset rolls and release all holds

        Returns:
            New state, or ``state`` itself when the category is already
            scored, no roll has been made this round, or the game is over
        """
        if not cls.can_score(state, category):
            return state

        score = ScoringEngine.calculate_potential_score(state.dice, category)

        yahtzee_bonus = state.yahtzee_bonus
        if (
            ScoringEngine.is_yahtzee(state.dice)
            and state.scorecard[ScoreCategory.YAHTZEE] == YAHTZEE_POINTS
        ):
            yahtzee_bonus += YAHTZEE_BONUS_POINTS
            logger.info("Yahtzee bonus awarded, bonus now %d", yahtzee_bonus)

        scorecard = state.scorecard.with_score(category, score)
        is_complete = ScoringEngine.is_scorecard_complete(scorecard)

        logger.debug("Scored %d in %s (round %d)", score, category.value, state.current_round)

        return replace(
            state,
            dice=tuple(die.released() for die in state.dice),
            rolls_left=cls.MAX_ROLLS,
            current_round=state.current_round if is_complete else state.current_round + 1,
            scorecard=scorecard,
            yahtzee_bonus=yahtzee_bonus,
            is_game_over=is_complete,
        )

    @classmethod
    def force_yahtzee(cls, state: GameState, value: int | None = None) -> GameState:
        """
        Debug helper: set all dice to one face, release holds, consume a roll.
        """
        if not cls.can_roll(state):
            return state

        if value is None:
            value = cls.roll_die()
        validate_dice_values((value,), count=1)

        dice = tuple(replace(die, value=value, is_held=False) for die in state.dice)
        return replace(state, dice=dice, rolls_left=state.rolls_left - 1)

    # === Queries ===

    @classmethod
    def get_potential_score(cls, state: GameState, category: ScoreCategory) -> int | None:
        """
        Preview score for ``category``.

        Returns:
            ``None`` if the category is filled or nothing was rolled this
            round, otherwise the points the current dice would bank
        """
        if state.scorecard[category] is not None:
            return None
        if not state.has_rolled:
            return None
        return ScoringEngine.calculate_potential_score(state.dice, category)

    @classmethod
    def total_score(cls, state: GameState) -> int:
        return ScoringEngine.calculate_grand_total(state.scorecard, state.yahtzee_bonus)
