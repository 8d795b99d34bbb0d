"""CSS injection and HTML animation helpers for the neon theme."""

from pathlib import Path

import streamlit as st

from src.engine.ratings import ScoreRating


def load_css() -> None:
    """Inject the neon CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "neon.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_splash_title() -> None:
    """Render the flickering splash title."""
    st.markdown(
        '<div class="splash-title">YAHTZEE</div>'
        '<div class="splash-subtitle">TAP TO START</div>',
        unsafe_allow_html=True,
    )


def render_score_popup(points: int) -> None:
    """Render an animated score popup."""
    st.markdown(
        f'<div class="score-popup">+{points}</div>',
        unsafe_allow_html=True,
    )


def render_yahtzee_animation(bonus: int = 0) -> None:
    """Render the Yahtzee celebration overlay."""
    bonus_html = f"<p>+{bonus} BONUS!</p>" if bonus else ""
    st.markdown(
        '<div class="yahtzee-overlay">'
        "<h1>YAHTZEE!</h1>"
        f"{bonus_html}"
        "</div>",
        unsafe_allow_html=True,
    )


def render_results_card(score: int, rating: ScoreRating, previous_best: int | None) -> None:
    """Render the final-score card with its rating headline."""
    best_html = ""
    if previous_best:
        best_html = f'<p class="tone-muted">HIGH SCORE: {previous_best}</p>'
    st.markdown(
        '<div class="results-card">'
        f'<h2 class="tone-{rating.tone}">{rating.text}</h2>'
        '<p class="tone-muted">FINAL SCORE</p>'
        f'<div class="final-score">{score}</div>'
        f"{best_html}"
        "</div>",
        unsafe_allow_html=True,
    )
