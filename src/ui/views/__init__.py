"""Page renderers for Neon Yahtzee."""

from src.ui.views.game import render_game_page
from src.ui.views.high_scores import render_high_scores_page
from src.ui.views.home import render_home_page
from src.ui.views.results import render_results_page
from src.ui.views.splash import render_splash_page

__all__ = [
    "render_game_page",
    "render_high_scores_page",
    "render_home_page",
    "render_results_page",
    "render_splash_page",
]
