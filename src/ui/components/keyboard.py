"""Keyboard shortcuts for the game page.

A single ``keydown`` listener is installed on the parent document and
replaced on every rerun. Each shortcut clicks the Streamlit button that
already performs the action, located through the ``st-key-<key>`` class
Streamlit puts on keyed widgets, so keyboard play goes through exactly the
same handlers as mouse play. Disabled buttons are never clicked, which
keeps the roll lock and the "no holds before the first roll" rule intact.

Arrow keys move a highlight over the open score buttons; Enter clicks the
highlighted one. The highlighted category is remembered across reruns in
``window.parent._ny_keys``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

import streamlit.components.v1 as components

from src.engine.base import NUM_DICE


@dataclass(frozen=True)
class Shortcut:
    """One keyboard binding: the keys, what they do and the button they click."""

    keys: tuple[str, ...]
    label: str
    description: str
    selector: str | None = None


ROLL_SELECTOR = '[class*="st-key-btn_roll_"] button'
SCORE_SELECTOR = '[class*="st-key-score_"] button'
MUTE_SELECTOR = ".st-key-_sfx_widget input"

KEYBOARD_SHORTCUTS: tuple[Shortcut, ...] = (
    Shortcut((" ",), "Space", "Roll the dice", ROLL_SELECTOR),
    *(
        Shortcut((str(i + 1),), str(i + 1), f"Hold / release die {i + 1}",
                 f'[class*="st-key-hold_{i}_r"] button')
        for i in range(NUM_DICE)
    ),
    Shortcut(("ArrowUp", "ArrowDown"), "↑ / ↓", "Move between open categories"),
    Shortcut(("Enter",), "Enter", "Score the highlighted category"),
    Shortcut(("m", "M"), "M", "Mute / unmute sound effects", MUTE_SELECTOR),
)


def shortcuts_markdown() -> str:
    """Markdown table of the shortcuts, for the rules panels."""
    lines = ["| Key | Action |", "|---|---|"]
    lines += [f"| `{s.label}` | {s.description} |" for s in KEYBOARD_SHORTCUTS]
    return "\n".join(lines)


def _click_bindings() -> dict[str, str]:
    return {key: s.selector for s in KEYBOARD_SHORTCUTS if s.selector for key in s.keys}


_LISTENER_JS = """\
<script>
(function() {
  var p = window.parent;
  var doc = p.document;
  var CLICKS = __CLICKS__;
  var SCORE = __SCORE__;
  var GAME_MARKER = __ROLL__;
  var state = p._ny_keys || (p._ny_keys = { focused: null, handler: null });

  function categoryOf(btn) {
    var holder = btn.closest('[class*="st-key-score_"]');
    var m = holder && holder.className.match(/st-key-score_(.+)_r\\d+/);
    return m ? m[1] : null;
  }

  function openCategories() {
    return Array.prototype.filter.call(doc.querySelectorAll(SCORE), function(b) {
      return !b.disabled;
    });
  }

  function paintFocus() {
    doc.querySelectorAll('.kb-focus').forEach(function(b) { b.classList.remove('kb-focus'); });
    openCategories().forEach(function(b) {
      if (categoryOf(b) === state.focused) b.classList.add('kb-focus');
    });
  }

  function moveFocus(step) {
    var open = openCategories();
    if (!open.length) return;
    var names = open.map(categoryOf);
    var i = names.indexOf(state.focused);
    if (i < 0) i = step > 0 ? -1 : 0;
    state.focused = names[(i + step + names.length) % names.length];
    paintFocus();
  }

  function click(selector) {
    var el = doc.querySelector(selector);
    if (el && !el.disabled) el.click();
  }

  function onKey(e) {
    var t = e.target;
    if (t && (t.tagName === 'INPUT' || t.tagName === 'TEXTAREA' || t.isContentEditable)) return;
    if (e.ctrlKey || e.metaKey || e.altKey) return;
    if (!doc.querySelector(GAME_MARKER)) return;

    if (CLICKS[e.key]) {
      e.preventDefault();
      click(CLICKS[e.key]);
    } else if (e.key === 'ArrowUp' || e.key === 'ArrowDown') {
      e.preventDefault();
      moveFocus(e.key === 'ArrowDown' ? 1 : -1);
    } else if (e.key === 'Enter' && state.focused) {
      var target = openCategories().filter(function(b) {
        return categoryOf(b) === state.focused;
      })[0];
      if (target) {
        e.preventDefault();
        state.focused = null;
        target.click();
      }
    }
  }

  if (state.handler) doc.removeEventListener('keydown', state.handler);
  state.handler = onKey;
  doc.addEventListener('keydown', onKey);
  paintFocus();
})();
</script>
"""


def build_keyboard_script() -> str:
    """Return the listener script with the current bindings filled in."""
    return (
        _LISTENER_JS
        .replace("__CLICKS__", json.dumps(_click_bindings()))
        .replace("__SCORE__", json.dumps(SCORE_SELECTOR))
        .replace("__ROLL__", json.dumps(ROLL_SELECTOR))
    )


def render_keyboard_shortcuts() -> None:
    """Install (or refresh) the game-page keyboard listener."""
    components.html(build_keyboard_script(), height=0)
