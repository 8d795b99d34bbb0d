"""Results page — final score, rating and high-score bookkeeping."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.database.models import HighScore
from src.engine.ratings import rate_final_score
from src.ui.state import discard_game_session, get_game_session, get_store, go_to
from src.ui.themes.animations import render_results_card


def render_results_page() -> None:
    """Render the results / game-over page."""
    ss = st.session_state
    session = get_game_session()

    if not session.state.is_game_over:
        go_to("game")
        return

    score = session.total_score
    store = get_store()

    # Save once per finished game; compare against the best *before* saving.
    if not ss.get("_result_saved"):
        previous_best = store.best()
        is_new_high = store.is_new_high_score(score)
        ss["_result_context"] = {
            "previous_best": previous_best,
            "is_new_high": is_new_high,
        }
        player_name = ss.get("player_name", get_settings().player_name)
        store.save(HighScore.create(score, player_name))
        ss["_result_saved"] = True
        ss["_celebrate"] = is_new_high

    context = ss["_result_context"]
    rating = rate_final_score(score, context["is_new_high"])

    st.title("Game Over")
    render_results_card(
        score,
        rating,
        None if context["is_new_high"] else context["previous_best"],
    )
    if ss.pop("_celebrate", False):
        st.balloons()

    st.divider()

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Play Again", type="primary", use_container_width=True):
            discard_game_session()
            go_to("game")
    with col2:
        if st.button("Return Home", use_container_width=True):
            discard_game_session()
            go_to("home")
