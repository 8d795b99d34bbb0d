"""Turn control buttons — Roll, New Game, Quit."""

from __future__ import annotations

import streamlit as st

from src.engine.base import MAX_ROLLS


def render_turn_controls(
    rolls_left: int,
    is_rolling: bool,
    is_game_over: bool,
    round_number: int,
    show_debug: bool = False,
) -> str | None:
    """Render contextual turn-action buttons.

    Returns:
        ``"roll"``, ``"force_yahtzee"``, ``"new_game"``, ``"quit"`` or
        ``None`` if no action taken.
    """
    if rolls_left == MAX_ROLLS:
        roll_label = "Roll Dice"
    elif rolls_left > 0:
        roll_label = f"Roll Again ({rolls_left} left)"
    else:
        roll_label = "No Rolls Left — Pick a Category"

    if st.button(
        roll_label,
        key=f"btn_roll_{round_number}_{rolls_left}",
        use_container_width=True,
        disabled=rolls_left <= 0 or is_rolling or is_game_over,
        type="primary",
    ):
        return "roll"

    if show_debug and st.button(
        "Force Yahtzee (debug)",
        key=f"btn_force_{round_number}_{rolls_left}",
        use_container_width=True,
        disabled=rolls_left <= 0 or is_game_over,
    ):
        return "force_yahtzee"

    cols = st.columns(2)
    with cols[0]:
        if st.button("New Game", key="btn_new_game", use_container_width=True):
            return "new_game"
    with cols[1]:
        if st.button("Quit", key="btn_quit", use_container_width=True):
            return "quit"

    return None
