"""Dice tray component — renders the five dice with hold controls."""

from __future__ import annotations

import streamlit as st

from src.engine.base import Die


def render_dice_tray(
    dice: tuple[Die, ...],
    can_hold: bool,
    is_rolling: bool,
    round_number: int,
    rolls_left: int,
) -> int | None:
    """Render dice with interactive hold buttons.

    Args:
        dice: The five dice of the current state.
        can_hold: Whether holding is allowed (a roll has been made).
        is_rolling: Whether the roll animation is still playing.
        round_number: Current round (used in button keys).
        rolls_left: Rolls left this round (used in button keys).

    Returns:
        Id of the die whose hold was toggled, or ``None``.
    """
    html_parts = ['<div class="dice-tray">']
    for die in dice:
        classes = ["die"]
        if die.is_held:
            classes.append("held")
        elif is_rolling:
            classes.append("rolling")
        html_parts.append(f'<div class="{" ".join(classes)}">{die.value}</div>')
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)

    if not can_hold:
        st.caption("Roll the dice to begin the round.")
        return None

    toggled: int | None = None
    cols = st.columns(len(dice))
    for die, col in zip(dice, cols):
        with col:
            key = f"hold_{die.id}_r{round_number}_{rolls_left}"
            label = "Held" if die.is_held else "Hold"
            if st.button(
                label,
                key=key,
                use_container_width=True,
                type="primary" if die.is_held else "secondary",
                disabled=is_rolling,
            ):
                toggled = die.id

    return toggled
