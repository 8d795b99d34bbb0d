"""Tests for src/session/controller.py — GameSession."""

import logging

import pytest

from src.engine.base import ALL_CATEGORIES, GameState, ScoreCategory
from src.session.controller import GameSession
from src.session.events import SessionEvent


@pytest.fixture
def events():
    return []


@pytest.fixture
def session(timer_factory, events):
    game = GameSession(animation_seconds=0.4, timer_factory=timer_factory)
    game.subscribe(events.append)
    yield game
    game.close()


def _names(events):
    return [p.event for p in events]


def _settle(timers):
    timers[-1].fire()


class TestRollDice:
    def test_roll_updates_state_and_emits(self, session, events):
        state = session.roll_dice([1, 2, 3, 4, 5])

        assert state.values == (1, 2, 3, 4, 5)
        assert session.state is state
        assert session.is_rolling is True
        assert _names(events) == [SessionEvent.DICE_ROLLED]
        assert events[0].data == {"values": (1, 2, 3, 4, 5), "rolls_left": 2}

    def test_roll_rejected_while_rolling(self, session, events):
        first = session.roll_dice([1, 2, 3, 4, 5])

        second = session.roll_dice([6, 6, 6, 6, 6])

        assert second is first
        assert second.rolls_left == 2
        assert len(events) == 1

    def test_roll_allowed_after_settle(self, session, events, timers):
        session.roll_dice([1, 2, 3, 4, 5])
        _settle(timers)

        state = session.roll_dice([6, 6, 6, 6, 6])

        assert state.rolls_left == 1
        assert _names(events) == [
            SessionEvent.DICE_ROLLED,
            SessionEvent.ROLL_SETTLED,
            SessionEvent.DICE_ROLLED,
        ]

    def test_invalid_roll_leaves_lock_released(self, session, events, timers):
        before = session.state

        with pytest.raises(ValueError, match="Exactly 5 dice"):
            session.roll_dice([1, 2, 3])

        assert session.state is before
        assert session.is_rolling is False
        assert timers == []
        assert events == []
        assert session.roll_dice([4, 4, 4, 4, 4]).rolls_left == 2

    def test_roll_rejected_without_rolls_left(self, session, events, timers):
        for _ in range(3):
            session.roll_dice([2, 2, 3, 3, 4])
            _settle(timers)
        events.clear()

        state = session.roll_dice([6, 6, 6, 6, 6])

        assert state.rolls_left == 0
        assert state.values == (2, 2, 3, 3, 4)
        assert events == []


class TestToggleHold:
    def test_toggle_rejected_while_rolling(self, session, events):
        before = session.roll_dice([1, 2, 3, 4, 5])

        assert session.toggle_hold(0) is before
        assert _names(events) == [SessionEvent.DICE_ROLLED]

    def test_toggle_after_settle(self, session, events, timers):
        session.roll_dice([1, 2, 3, 4, 5])
        _settle(timers)

        state = session.toggle_hold(3)

        assert state.held_ids == frozenset({3})
        assert events[-1].event is SessionEvent.DIE_TOGGLED
        assert events[-1].data == {"die_id": 3, "is_held": True}

    def test_toggle_before_first_roll_is_silent(self, session, events):
        session.toggle_hold(0)
        assert events == []


class TestScoreCategory:
    def test_score_cancels_roll_animation(self, session, events, timers):
        session.roll_dice([3, 3, 3, 2, 2])

        state = session.score_category(ScoreCategory.FULL_HOUSE)

        assert session.is_rolling is False
        assert timers[0].cancelled is True
        assert state.scorecard[ScoreCategory.FULL_HOUSE] == 25
        assert events[-1].event is SessionEvent.CATEGORY_SCORED
        assert events[-1].data == {
            "category": ScoreCategory.FULL_HOUSE,
            "points": 25,
            "bonus": 0,
        }

    def test_late_timer_after_score_is_ignored(self, session, events, timers):
        session.roll_dice([3, 3, 3, 2, 2])
        session.score_category(ScoreCategory.FULL_HOUSE)
        events.clear()

        timers[0].function(*timers[0].args)

        assert session.is_rolling is False
        assert events == []

    def test_illegal_score_still_cancels_lock(self, session, events, timers):
        session.roll_dice([1, 1, 1, 1, 1])
        _settle(timers)
        session.score_category(ScoreCategory.ONES)
        session.roll_dice([1, 1, 1, 1, 1])
        events.clear()

        before = session.state
        after = session.score_category(ScoreCategory.ONES)

        assert after is before
        assert session.is_rolling is False
        assert events == []

    def test_accepts_category_value(self, session):
        session.roll_dice([2, 3, 4, 5, 6])
        state = session.score_category("large_straight")
        assert state.scorecard[ScoreCategory.LARGE_STRAIGHT] == 40

    def test_unknown_category_raises(self, session):
        session.roll_dice([2, 3, 4, 5, 6])
        with pytest.raises(ValueError, match="Unknown score category"):
            session.score_category("sevens")

    def test_score_before_roll_is_noop(self, session, events):
        before = session.state
        assert session.score_category(ScoreCategory.CHANCE) is before
        assert events == []

    def test_yahtzee_box_emits_yahtzee_event(self, session, events):
        session.roll_dice([5, 5, 5, 5, 5])
        session.score_category(ScoreCategory.YAHTZEE)

        assert events[-1].event is SessionEvent.YAHTZEE_SCORED
        assert events[-1].data["points"] == 50

    def test_yahtzee_dice_elsewhere_without_bonus_is_plain_score(self, session, events):
        session.roll_dice([5, 5, 5, 5, 5])
        session.score_category(ScoreCategory.CHANCE)

        assert events[-1].event is SessionEvent.CATEGORY_SCORED
        assert events[-1].data["points"] == 25

    def test_bonus_yahtzee_emits_yahtzee_event(self, session, events):
        session.roll_dice([5, 5, 5, 5, 5])
        session.score_category(ScoreCategory.YAHTZEE)
        session.roll_dice([2, 2, 2, 2, 2])
        state = session.score_category(ScoreCategory.TWOS)

        assert state.yahtzee_bonus == 100
        assert events[-1].event is SessionEvent.YAHTZEE_SCORED
        assert events[-1].data == {"category": ScoreCategory.TWOS, "points": 10, "bonus": 100}

    def test_full_game_emits_game_over(self, session, events, caplog):
        with caplog.at_level(logging.INFO, logger="src.session.controller"):
            for category in ALL_CATEGORIES:
                session.roll_dice([6, 6, 6, 5, 5])
                session.score_category(category)

        assert session.state.is_game_over is True
        assert events[-1].event is SessionEvent.GAME_OVER
        assert events[-1].data == {"total_score": session.total_score}
        assert "Game over" in caplog.text

    def test_potential_score_passthrough(self, session):
        assert session.get_potential_score(ScoreCategory.CHANCE) is None
        session.roll_dice([6, 6, 6, 5, 5])
        assert session.get_potential_score(ScoreCategory.CHANCE) == 28

    def test_potential_score_accepts_category_value(self, session):
        session.roll_dice([6, 6, 6, 5, 5])
        assert session.get_potential_score("full_house") == 25
        with pytest.raises(ValueError, match="Unknown score category"):
            session.get_potential_score("sevens")


class TestResetAndDebug:
    def test_reset_starts_new_game(self, session, events, timers):
        session.roll_dice([1, 2, 3, 4, 5])

        state = session.reset_game()

        assert state == GameState.initial()
        assert session.is_rolling is False
        assert timers[0].cancelled is True
        assert events[-1].event is SessionEvent.GAME_RESET

    def test_force_yahtzee(self, session, events):
        state = session.force_yahtzee(3)

        assert state.values == (3, 3, 3, 3, 3)
        assert session.is_rolling is True
        assert events[-1].event is SessionEvent.DICE_ROLLED

    def test_invalid_force_value_leaves_lock_released(self, session, events, timers):
        before = session.state

        with pytest.raises(ValueError):
            session.force_yahtzee(9)

        assert session.state is before
        assert session.is_rolling is False
        assert timers == []
        assert events == []

    def test_close_cancels_timer(self, session, timers):
        session.roll_dice([1, 2, 3, 4, 5])
        session.close()
        assert session.is_rolling is False
        assert timers[0].cancelled is True

    def test_no_animation_never_blocks(self):
        game = GameSession(animation_seconds=0)
        game.roll_dice([1, 2, 3, 4, 5])
        assert game.is_rolling is False
        assert game.roll_dice([6, 6, 6, 6, 6]).rolls_left == 1


class TestListeners:
    def test_failing_listener_is_logged_and_skipped(self, timer_factory, caplog):
        game = GameSession(timer_factory=timer_factory)
        received = []

        def broken(payload):
            raise RuntimeError("boom")

        game.subscribe(broken)
        game.subscribe(received.append)

        with caplog.at_level(logging.ERROR, logger="src.session.controller"):
            game.roll_dice([1, 2, 3, 4, 5])

        assert len(received) == 1
        assert "Session listener failed" in caplog.text

    def test_unsubscribe(self, timer_factory):
        game = GameSession(timer_factory=timer_factory)
        received = []
        unsubscribe = game.subscribe(received.append)

        unsubscribe()
        game.roll_dice([1, 2, 3, 4, 5])

        assert received == []
        unsubscribe()
