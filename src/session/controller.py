"""
Neon Yahtzee - Game Session Controller

Owns the single mutable handle on a game: the current immutable
``GameState`` snapshot and the roll-animation lock. UI intents arrive
here, are applied through :class:`YahtzeeEngine`, and the resulting
events are dispatched to listeners (sound effects, UI refresh).
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Sequence

from src.engine.base import YAHTZEE_POINTS, GameState, ScoreCategory
from src.engine.game import YahtzeeEngine
from src.engine.validators import validate_category
from src.session.events import EventPayload, SessionEvent
from src.session.roll_lock import RollAnimationLock, TimerFactory

logger = logging.getLogger(__name__)

ROLL_ANIMATION_SECONDS = 0.4

Listener = Callable[[EventPayload], None]


class GameSession:
    """Single-player session: state snapshot + roll-animation lock.

    All transitions are atomic: the snapshot is replaced as a whole under
    a lock, because the animation timer releases from its own thread.
    Illegal intents leave the snapshot untouched.

    Args:
        animation_seconds: How long rolls and holds stay blocked after a
            roll. ``0`` disables the lock.
        timer_factory: Injected into :class:`RollAnimationLock`.
    """

    def __init__(
        self,
        *,
        animation_seconds: float = ROLL_ANIMATION_SECONDS,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self._state = YahtzeeEngine.new_game()
        self._state_lock = threading.Lock()
        self._listeners: list[Listener] = []
        self._roll_lock = RollAnimationLock(
            animation_seconds,
            timer_factory=timer_factory,
            on_release=self._on_roll_settled,
        )

    # -- Observers -------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_rolling(self) -> bool:
        return self._roll_lock.is_engaged

    @property
    def total_score(self) -> int:
        return YahtzeeEngine.total_score(self._state)

    def get_potential_score(self, category: ScoreCategory | str) -> int | None:
        return YahtzeeEngine.get_potential_score(self._state, validate_category(category))

    # -- Listeners -------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: SessionEvent, **data) -> None:
        payload = EventPayload(event=event, data=data)
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Session listener failed for %s", event.name)

    # -- Transitions -----------------------------------------------------

    def roll_dice(self, rolled: Sequence[int] | None = None) -> GameState:
        """Roll unheld dice unless out of rolls or mid-animation."""
        with self._state_lock:
            if self._roll_lock.is_engaged or not YahtzeeEngine.can_roll(self._state):
                return self._state
            self._state = YahtzeeEngine.roll(self._state, rolled)
            self._roll_lock.arm()
            state = self._state

        self._emit(SessionEvent.DICE_ROLLED, values=state.values, rolls_left=state.rolls_left)
        return state

    def toggle_hold(self, die_id: int) -> GameState:
        """Flip one die's hold; ignored while the roll animation plays."""
        with self._state_lock:
            if self._roll_lock.is_engaged:
                return self._state
            previous = self._state
            self._state = YahtzeeEngine.toggle_hold(previous, die_id)
            state = self._state

        if state is not previous:
            self._emit(SessionEvent.DIE_TOGGLED, die_id=die_id, is_held=state.dice[die_id].is_held)
        return state

    def score_category(self, category: ScoreCategory | str) -> GameState:
        """Bank the dice in ``category`` (enum or its value, e.g. ``"chance"``).

        Always cancels an in-flight roll animation, even when the scoring
        itself turns out to be illegal.
        """
        category = validate_category(category)
        with self._state_lock:
            self._roll_lock.cancel()
            previous = self._state
            self._state = YahtzeeEngine.score_category(previous, category)
            state = self._state

        if state is previous:
            return state

        points = state.scorecard[category]
        bonus_awarded = state.yahtzee_bonus - previous.yahtzee_bonus
        is_yahtzee = bonus_awarded > 0 or (
            category is ScoreCategory.YAHTZEE and points == YAHTZEE_POINTS
        )
        event = SessionEvent.YAHTZEE_SCORED if is_yahtzee else SessionEvent.CATEGORY_SCORED
        self._emit(event, category=category, points=points, bonus=bonus_awarded)

        if state.is_game_over:
            total = YahtzeeEngine.total_score(state)
            logger.info("Game over with %d points", total)
            self._emit(SessionEvent.GAME_OVER, total_score=total)
        return state

    def reset_game(self) -> GameState:
        """Discard the current game and start a fresh one."""
        with self._state_lock:
            self._roll_lock.cancel()
            self._state = YahtzeeEngine.new_game()
            state = self._state

        logger.info("New game started")
        self._emit(SessionEvent.GAME_RESET)
        return state

    def force_yahtzee(self, value: int | None = None) -> GameState:
        """Debug helper: roll a Yahtzee, consuming one roll."""
        with self._state_lock:
            if not YahtzeeEngine.can_roll(self._state):
                return self._state
            self._state = YahtzeeEngine.force_yahtzee(self._state, value)
            self._roll_lock.arm()
            state = self._state

        self._emit(SessionEvent.DICE_ROLLED, values=state.values, rolls_left=state.rolls_left)
        return state

    def close(self) -> None:
        """Cancel any pending animation timer."""
        self._roll_lock.cancel()

    def _on_roll_settled(self) -> None:
        self._emit(SessionEvent.ROLL_SETTLED)
