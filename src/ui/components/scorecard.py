"""Scorecard component — category rows, previews and section totals."""

from __future__ import annotations

import streamlit as st

from src.engine.base import (
    LOWER_CATEGORIES,
    UPPER_BONUS_POINTS,
    UPPER_BONUS_THRESHOLD,
    UPPER_CATEGORIES,
    GameState,
    ScoreCategory,
)
from src.engine.game import YahtzeeEngine
from src.engine.scoring import ScoringEngine


def _total_row(label: str, value: int | str, css_class: str = "total") -> None:
    st.markdown(
        f'<div class="scorecard-row {css_class}">'
        f"<span>{label}</span><span class=\"score\">{value}</span>"
        f"</div>",
        unsafe_allow_html=True,
    )


def _category_rows(
    state: GameState,
    categories: tuple[ScoreCategory, ...],
    previews: dict[ScoreCategory, int],
    disabled: bool,
) -> ScoreCategory | None:
    selected: ScoreCategory | None = None

    for category in categories:
        label_col, score_col = st.columns([3, 1])
        banked = state.scorecard[category]
        with label_col:
            st.markdown(f"**{category.label}**  \n<small>{category.description}</small>",
                        unsafe_allow_html=True)
        with score_col:
            if banked is not None:
                st.markdown(f'<div class="scorecard-row filled"><span class="score">{banked}</span></div>',
                            unsafe_allow_html=True)
                continue

            preview = previews.get(category)
            if st.button(
                "—" if preview is None else str(preview),
                key=f"score_{category.value}_r{state.current_round}",
                use_container_width=True,
                disabled=disabled or preview is None,
                help=f"Score {category.label}",
            ):
                selected = category

    return selected


def render_scorecard(
    state: GameState,
    is_rolling: bool,
) -> ScoreCategory | None:
    """Render the full scorecard.

    Open categories are buttons showing the score the current dice would
    bank; they are disabled before the first roll of a round and while
    the roll animation plays.

    Returns:
        The category the player chose to score, or ``None``.
    """
    scorecard = state.scorecard
    disabled = is_rolling or state.is_game_over
    # No previews until the round's first roll
    previews = ScoringEngine.calculate_all_potential_scores(state.dice) if state.has_rolled else {}

    upper_total = ScoringEngine.calculate_upper_total(scorecard)
    upper_bonus = ScoringEngine.calculate_upper_bonus(scorecard)

    st.markdown("#### Upper Section")
    selected = _category_rows(state, UPPER_CATEGORIES, previews, disabled)
    _total_row("Upper Total", upper_total)
    if upper_bonus:
        _total_row("Bonus", f"+{UPPER_BONUS_POINTS}", "bonus")
    else:
        _total_row(
            f"Bonus ({upper_total}/{UPPER_BONUS_THRESHOLD})",
            f"{max(UPPER_BONUS_THRESHOLD - upper_total, 0)} to go",
            "bonus",
        )

    st.markdown("#### Lower Section")
    selected = _category_rows(state, LOWER_CATEGORIES, previews, disabled) or selected
    _total_row("Lower Total", ScoringEngine.calculate_lower_total(scorecard))
    if state.yahtzee_bonus:
        _total_row("Yahtzee Bonus", f"+{state.yahtzee_bonus}", "bonus")

    _total_row("Grand Total", YahtzeeEngine.total_score(state))
    return selected
