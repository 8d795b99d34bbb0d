"""
Neon Yahtzee Session Layer.

Session controller, roll-animation lock and event dispatch for the UI.
"""

from src.session.controller import GameSession
from src.session.events import EventPayload, SessionEvent, sound_for_event
from src.session.roll_lock import RollAnimationLock

__all__ = [
    "EventPayload",
    "GameSession",
    "RollAnimationLock",
    "SessionEvent",
    "sound_for_event",
]
