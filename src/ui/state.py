"""Session-state glue between Streamlit and the game session."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.database.high_scores import HighScoreStore, get_high_score_store
from src.session.controller import GameSession
from src.session.events import EventPayload, SessionEvent, sound_for_event
from src.ui.themes.sounds import play_sfx


def _on_session_event(payload: EventPayload) -> None:
    """Route session events to sounds and one-shot overlays."""
    sfx = sound_for_event(payload.event)
    if sfx is None:
        return
    play_sfx(sfx)

    if payload.event in (SessionEvent.CATEGORY_SCORED, SessionEvent.YAHTZEE_SCORED):
        st.session_state["_last_scored"] = {
            "points": payload.data.get("points", 0),
            "bonus": payload.data.get("bonus", 0),
            "is_yahtzee": payload.event is SessionEvent.YAHTZEE_SCORED,
        }


def get_game_session() -> GameSession:
    """Return this browser session's GameSession, creating it on first use."""
    ss = st.session_state
    session = ss.get("game_session")
    if session is None:
        settings = get_settings()
        session = GameSession(animation_seconds=settings.roll_animation_seconds)
        session.subscribe(_on_session_event)
        ss["game_session"] = session
    return session


def discard_game_session() -> None:
    """Drop the current game (navigating away ends it)."""
    session = st.session_state.pop("game_session", None)
    if session is not None:
        session.close()
    for key in ("_last_scored", "_result_saved", "_result_context"):
        st.session_state.pop(key, None)


@st.cache_resource(show_spinner=False)
def get_store() -> HighScoreStore:
    """Process-wide high-score store."""
    return get_high_score_store(get_settings())


def go_to(page: str) -> None:
    """Switch screens and rerun."""
    st.session_state["page"] = page
    st.rerun()
