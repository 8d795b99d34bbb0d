"""High scores page — the top-10 table."""

from __future__ import annotations

import html

import streamlit as st

from src.ui.state import get_store, go_to


def render_high_scores_page() -> None:
    """Render the high-score table."""
    st.title("High Scores")
    store = get_store()
    entries = store.load()

    if not entries:
        st.info("No high scores yet. Play a game!")
    for rank, entry in enumerate(entries, 1):
        css = "high-score-row top" if rank == 1 else "high-score-row"
        st.markdown(
            f'<div class="{css}">'
            f"<span>{rank}. {html.escape(entry.player_name)}</span>"
            f"<span>{entry.date[:10]}</span>"
            f"<span>{entry.score}</span>"
            f"</div>",
            unsafe_allow_html=True,
        )

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Back", key="btn_hs_back", use_container_width=True):
            go_to("home")
    with col2:
        if entries and st.button("Clear Scores", key="btn_hs_clear", use_container_width=True):
            store.clear()
            st.rerun()
