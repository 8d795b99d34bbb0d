"""Splash page — animated title, any click starts."""

from __future__ import annotations

import streamlit as st

from src.ui.state import go_to
from src.ui.themes.animations import render_splash_title


def render_splash_page() -> None:
    """Render the splash screen."""
    render_splash_title()
    _, mid, _ = st.columns([1, 2, 1])
    with mid:
        if st.button("Start", key="btn_splash_start", type="primary", use_container_width=True):
            go_to("home")
