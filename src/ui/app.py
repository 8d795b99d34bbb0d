"""Neon Yahtzee — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from src.config.settings import configure_logging, get_settings

_GAME_RULES = """\
**Round:** roll up to 3 times, hold dice between rolls, then score
one open category.

| Category | Points |
|---|---|
| Ones - Sixes | Sum of that face |
| 3 / 4 of a Kind | Sum of all dice |
| Full House | 25 |
| Small Straight | 30 |
| Large Straight | 40 |
| Yahtzee | 50 |
| Chance | Sum of all dice |

Upper total 63+ = **+35**. Extra Yahtzees = **+100** each.
"""


def _render_sidebar_rules() -> None:
    """Show the scoring table in the sidebar during play."""
    from src.ui.components.keyboard import shortcuts_markdown

    with st.sidebar:
        st.divider()
        st.markdown("### Scoring")
        st.markdown(_GAME_RULES)
        st.markdown("### Keyboard")
        st.markdown(shortcuts_markdown())


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Neon Yahtzee",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    configure_logging(get_settings())

    # Load neon theme CSS and sound system
    from src.ui.themes import (
        load_css,
        render_audio_system,
        render_sound_controls,
    )
    load_css()

    # Session state defaults
    if "page" not in st.session_state:
        st.session_state["page"] = "splash"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "splash":
        from src.ui.views.splash import render_splash_page
        render_splash_page()
    elif page == "home":
        from src.ui.views.home import render_home_page
        render_home_page()
    elif page == "game":
        from src.ui.views.game import render_game_page
        render_game_page()
    elif page == "results":
        from src.ui.views.results import render_results_page
        render_results_page()
    elif page == "high_scores":
        from src.ui.views.high_scores import render_high_scores_page
        render_high_scores_page()
    else:
        st.session_state["page"] = "home"
        st.rerun()

    # Sound system (sidebar controls + JS-cached audio)
    render_sound_controls()
    render_audio_system()

    if page == "game":
        _render_sidebar_rules()


if __name__ == "__main__":
    main()
