"""Neon arcade theme for Neon Yahtzee."""

from src.ui.themes.animations import load_css
from src.ui.themes.sounds import (
    play_sfx,
    render_audio_system,
    render_sound_controls,
)

__all__ = [
    "load_css",
    "play_sfx",
    "render_audio_system",
    "render_sound_controls",
]
