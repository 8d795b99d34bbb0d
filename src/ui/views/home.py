"""Home page — title, rules, play and high-score navigation."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.engine.validators import validate_player_name
from src.ui.components.keyboard import shortcuts_markdown
from src.ui.state import discard_game_session, get_store, go_to

_RULES = """\
**Goal:** Fill all 13 boxes of the scorecard for the highest total.

**Each round:**
- Roll up to **3 times**
- After the first roll, **hold** any dice you want to keep
- Score the dice in one open category; every box is used exactly once
- A box can be scored for **0** if nothing fits

**Scoring:**
| Category | Points |
|---|---|
| Ones - Sixes | Sum of that face |
| Three / Four of a Kind | Sum of all dice |
| Full House (3 + 2) | 25 |
| Small Straight (4 in a row) | 30 |
| Large Straight (5 in a row) | 40 |
| Yahtzee (5 of a kind) | 50 |
| Chance | Sum of all dice |

**Bonuses:**
- Upper section total of **63+** earns **35**
- Every extra Yahtzee after scoring 50 in the Yahtzee box earns **100**
"""


def render_home_page() -> None:
    """Render the home / landing page."""
    st.title("Neon Yahtzee")
    st.caption("Five dice. Thirteen rounds. One high score.")

    best = get_store().best()
    if best:
        st.markdown(f"Best score: **{best}**")

    name = st.text_input(
        "Player name",
        value=st.session_state.get("player_name", get_settings().player_name),
        max_chars=30,
    )

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Play", key="btn_play", type="primary", use_container_width=True):
            try:
                st.session_state["player_name"] = validate_player_name(name)
            except ValueError as e:
                st.error(str(e))
            else:
                discard_game_session()
                go_to("game")
    with col2:
        if st.button("High Scores", key="btn_high_scores", use_container_width=True):
            go_to("high_scores")

    st.divider()

    with st.expander("How to Play"):
        st.markdown(_RULES)
        st.markdown("**Keyboard shortcuts** (during a game):")
        st.markdown(shortcuts_markdown())
