"""
Neon Yahtzee - Session Event Definitions

Event types and payloads emitted by a game session, plus the mapping from
events to sound effects.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class SessionEvent(Enum):
    """Events that can occur during a game session."""

    DICE_ROLLED = auto()
    DIE_TOGGLED = auto()
    CATEGORY_SCORED = auto()
    YAHTZEE_SCORED = auto()
    GAME_OVER = auto()
    GAME_RESET = auto()
    ROLL_SETTLED = auto()


@dataclass
class EventPayload:
    """Wrapper for session event data."""

    event: SessionEvent
    data: dict[str, Any] = field(default_factory=dict)


# Events without an entry are silent
_SFX_EVENT_MAP: dict[SessionEvent, str] = {
    SessionEvent.DICE_ROLLED: "roll",
    SessionEvent.DIE_TOGGLED: "select",
    SessionEvent.CATEGORY_SCORED: "score",
    SessionEvent.YAHTZEE_SCORED: "yahtzee",
}


def sound_for_event(event: SessionEvent) -> str | None:
    """Name of the sound effect played for ``event``, if any."""
    return _SFX_EVENT_MAP.get(event)
