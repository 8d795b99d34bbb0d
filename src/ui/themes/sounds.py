"""Sound effects for Neon Yahtzee.

Audio data (base64-encoded WAV) is sent to the browser ONCE per effect and
cached in ``window.parent._ny_audio``. Subsequent Streamlit reruns send
only a tiny play command instead of the base64 payload.

Playback is fire-and-forget: unknown names, missing files and browser
autoplay refusals are all ignored.

The SFX on/off preference is stored in the non-widget session-state key
``_sfx_pref`` so it survives Streamlit's widget-lifecycle cleanup during
page transitions.
"""

from __future__ import annotations

import base64
from pathlib import Path

import streamlit as st
import streamlit.components.v1 as components

from src.config.settings import get_settings

# ---------------------------------------------------------------------------
# Asset paths and mappings
# ---------------------------------------------------------------------------

_SOUNDS_DIR = Path(__file__).resolve().parents[3] / "assets" / "sounds"

_SFX_FILES: dict[str, str] = {
    "roll": "roll.wav",
    "select": "select.wav",
    "score": "score.wav",
    "yahtzee": "yahtzee.wav",
}

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@st.cache_data(show_spinner=False)
def _load_audio_b64(filename: str) -> str | None:
    """Read an audio file and return its base64-encoded string.

    Returns ``None`` if the file doesn't exist.
    """
    path = _SOUNDS_DIR / filename
    if not path.exists():
        return None
    return base64.b64encode(path.read_bytes()).decode("ascii")


# ---------------------------------------------------------------------------
# Public API: SFX
# ---------------------------------------------------------------------------


def play_sfx(name: str) -> None:
    """Queue a sound effect to be played on the next render cycle.

    Call this from action handlers (roll, hold, score).
    The actual playback happens in :func:`render_audio_system`.
    """
    if not st.session_state.get("_sfx_pref", get_settings().enable_sounds):
        return
    if name not in _SFX_FILES:
        return
    st.session_state["_sfx_pending"] = name


# ---------------------------------------------------------------------------
# Public API: sidebar controls
# ---------------------------------------------------------------------------


def _sync_sfx_pref() -> None:
    st.session_state["_sfx_pref"] = st.session_state["_sfx_widget"]


def _sync_sfx_volume() -> None:
    st.session_state["_sfx_volume"] = st.session_state["_sfx_vol_widget"]


def render_sound_controls() -> None:
    """Render the SFX toggle and volume slider in the sidebar."""
    with st.sidebar:
        st.session_state.setdefault("_sfx_pref", get_settings().enable_sounds)
        st.session_state.setdefault("_sfx_volume", 70)

        st.toggle(
            "Sound Effects",
            value=st.session_state["_sfx_pref"],
            key="_sfx_widget",
            on_change=_sync_sfx_pref,
        )
        if st.session_state["_sfx_pref"]:
            st.slider(
                "SFX Volume",
                min_value=0,
                max_value=100,
                value=st.session_state["_sfx_volume"],
                key="_sfx_vol_widget",
                on_change=_sync_sfx_volume,
                format="%d%%",
            )


# ---------------------------------------------------------------------------
# Public API: audio system renderer
# ---------------------------------------------------------------------------


def render_audio_system() -> None:
    """Play the pending sound effect, if any.

    Uses a single ``components.html`` call with JavaScript that caches
    the audio data in ``window.parent._ny_audio``. Base64 data is included
    **only** the first time an effect is needed.
    """
    sfx_pending = st.session_state.pop("_sfx_pending", None)
    if not sfx_pending or not st.session_state.get("_sfx_pref", True):
        return

    volume = st.session_state.get("_sfx_volume", 70) / 100.0
    loaded: set[str] = st.session_state.get("_audio_loaded", set())
    preload_js = ""

    if sfx_pending not in loaded:
        b64 = _load_audio_b64(_SFX_FILES[sfx_pending])
        if b64 is None:
            return
        preload_js = f"ny.sfx['{sfx_pending}'] = 'data:audio/wav;base64,{b64}';"
        loaded.add(sfx_pending)
        st.session_state["_audio_loaded"] = loaded

    html = (
        "<script>\n"
        "(function() {\n"
        "  try {\n"
        "    var p = window.parent;\n"
        "    if (!p._ny_audio) p._ny_audio = { sfx: {} };\n"
        "    var ny = p._ny_audio;\n"
        f"    {preload_js}\n"
        f"    if (ny.sfx['{sfx_pending}']) {{\n"
        f"      var s = new p.Audio(ny.sfx['{sfx_pending}']);\n"
        f"      s.volume = {volume};\n"
        "      s.play().catch(function(){});\n"
        "    }\n"
        "  } catch(e) {}\n"
        "})();\n"
        "</script>"
    )

    components.html(html, height=0)
