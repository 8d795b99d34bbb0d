"""Game page — the main play area with dice, controls, and scorecard."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.engine.base import TOTAL_ROUNDS
from src.engine.game import YahtzeeEngine
from src.session.controller import GameSession
from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.keyboard import render_keyboard_shortcuts
from src.ui.components.scorecard import render_scorecard
from src.ui.components.turn_controls import render_turn_controls
from src.ui.state import discard_game_session, get_game_session, go_to
from src.ui.themes.animations import render_score_popup, render_yahtzee_animation


def render_game_page() -> None:
    """Render the main game page."""
    session = get_game_session()
    state = session.state

    if state.is_game_over:
        go_to("results")
        return

    # --- Layout: dice + controls (3) | scorecard (2) ---
    play_col, card_col = st.columns([3, 2])

    with play_col:
        st.markdown(
            '<div class="status-bar">'
            f'<span>ROUND <span class="value">{state.display_round}/{TOTAL_ROUNDS}</span></span>'
            f'<span>ROLLS <span class="value">{state.rolls_left}</span></span>'
            f'<span>SCORE <span class="value">{session.total_score}</span></span>'
            "</div>",
            unsafe_allow_html=True,
        )

        _show_last_scored()

        toggled = render_dice_tray(
            dice=state.dice,
            can_hold=YahtzeeEngine.can_hold(state),
            is_rolling=session.is_rolling,
            round_number=state.current_round,
            rolls_left=state.rolls_left,
        )
        if toggled is not None:
            session.toggle_hold(toggled)
            st.rerun()

        action = render_turn_controls(
            rolls_left=state.rolls_left,
            is_rolling=session.is_rolling,
            is_game_over=state.is_game_over,
            round_number=state.current_round,
            show_debug=get_settings().debug,
        )
        _handle_action(action, session)

    with card_col:
        selected = render_scorecard(state, is_rolling=session.is_rolling)
        if selected is not None:
            session.score_category(selected)
            if session.state.is_game_over:
                go_to("results")
                return
            st.rerun()

    render_keyboard_shortcuts()

    if session.is_rolling:
        _watch_roll_animation()


def _handle_action(action: str | None, session: GameSession) -> None:
    if action == "roll":
        session.roll_dice()
        st.rerun()
    elif action == "force_yahtzee":
        session.force_yahtzee()
        st.rerun()
    elif action == "new_game":
        session.reset_game()
        st.session_state.pop("_last_scored", None)
        st.rerun()
    elif action == "quit":
        discard_game_session()
        go_to("home")


def _show_last_scored() -> None:
    """One-shot popup for the category scored on the previous rerun."""
    last = st.session_state.pop("_last_scored", None)
    if not last:
        return
    if last["is_yahtzee"]:
        render_yahtzee_animation(last["bonus"])
    elif last["points"] or last["bonus"]:
        render_score_popup(last["points"] + last["bonus"])


@st.fragment(run_every=0.2)
def _watch_roll_animation() -> None:
    """Rerun the page once the roll animation lock releases.

    The lock is released by a timer thread, so the page must poll to
    re-enable the controls it disabled.
    """
    session = st.session_state.get("game_session")
    if session is not None and not session.is_rolling:
        st.rerun(scope="app")
