"""UI components for Neon Yahtzee."""

from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.keyboard import render_keyboard_shortcuts, shortcuts_markdown
from src.ui.components.scorecard import render_scorecard
from src.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_dice_tray",
    "render_keyboard_shortcuts",
    "render_scorecard",
    "render_turn_controls",
    "shortcuts_markdown",
]
