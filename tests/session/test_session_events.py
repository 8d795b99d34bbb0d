"""Tests for src/session/events.py — SessionEvent enum and sound mapping."""

import pytest

from src.session.events import EventPayload, SessionEvent, sound_for_event


class TestSessionEvent:
    def test_all_events_defined(self):
        expected = {
            "DICE_ROLLED", "DIE_TOGGLED", "CATEGORY_SCORED", "YAHTZEE_SCORED",
            "GAME_OVER", "GAME_RESET", "ROLL_SETTLED",
        }
        assert {e.name for e in SessionEvent} == expected


class TestEventPayload:
    def test_default_data(self):
        payload = EventPayload(event=SessionEvent.GAME_RESET)
        assert payload.data == {}

    def test_data_not_shared(self):
        a = EventPayload(event=SessionEvent.GAME_RESET)
        b = EventPayload(event=SessionEvent.GAME_RESET)
        a.data["x"] = 1
        assert b.data == {}


class TestSoundForEvent:
    @pytest.mark.parametrize("event,sound", [
        (SessionEvent.DICE_ROLLED, "roll"),
        (SessionEvent.DIE_TOGGLED, "select"),
        (SessionEvent.CATEGORY_SCORED, "score"),
        (SessionEvent.YAHTZEE_SCORED, "yahtzee"),
    ])
    def test_mapped_events(self, event, sound):
        assert sound_for_event(event) == sound

    @pytest.mark.parametrize("event", [
        SessionEvent.GAME_OVER,
        SessionEvent.GAME_RESET,
        SessionEvent.ROLL_SETTLED,
    ])
    def test_silent_events(self, event):
        assert sound_for_event(event) is None
