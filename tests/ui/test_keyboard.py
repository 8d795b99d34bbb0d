"""Tests for src/ui/components/keyboard.py — shortcut bindings and listener script."""

import json
import re

import pytest

from src.engine.base import NUM_DICE, ScoreCategory
from src.ui.components.keyboard import (
    KEYBOARD_SHORTCUTS,
    ROLL_SELECTOR,
    SCORE_SELECTOR,
    _click_bindings,
    build_keyboard_script,
    shortcuts_markdown,
)


def _class_prefix(selector: str) -> str:
    """Pull ``st-key-...`` out of a ``[class*="st-key-..."]`` selector."""
    match = re.search(r'class\*="(st-key-[^"]+)"', selector)
    assert match, selector
    return match.group(1)


class TestBindings:
    def test_all_keys_bound(self):
        keys = {key for s in KEYBOARD_SHORTCUTS for key in s.keys}
        assert keys == {" ", "1", "2", "3", "4", "5", "ArrowUp", "ArrowDown", "Enter", "m", "M"}

    def test_space_clicks_roll_button(self):
        # Same key format as the turn controls' roll button
        assert ("st-key-" + "btn_roll_4_2").startswith(_class_prefix(_click_bindings()[" "]))

    @pytest.mark.parametrize("die_id", range(NUM_DICE))
    def test_number_keys_click_matching_hold_button(self, die_id):
        selector = _click_bindings()[str(die_id + 1)]
        prefix = _class_prefix(selector)
        assert f"st-key-hold_{die_id}_r7_1".startswith(prefix)
        others = [i for i in range(NUM_DICE) if i != die_id]
        assert not any(f"st-key-hold_{i}_r7_1".startswith(prefix) for i in others)

    def test_score_selector_matches_every_category(self):
        prefix = _class_prefix(SCORE_SELECTOR)
        for category in ScoreCategory:
            assert f"st-key-score_{category.value}_r3".startswith(prefix)

    def test_mute_clicks_sound_toggle(self):
        bindings = _click_bindings()
        assert bindings["m"] == bindings["M"]
        assert "_sfx_widget" in bindings["m"]

    def test_navigation_keys_click_nothing(self):
        bindings = _click_bindings()
        for key in ("ArrowUp", "ArrowDown", "Enter"):
            assert key not in bindings


class TestListenerScript:
    def test_placeholders_filled(self):
        script = build_keyboard_script()
        assert "__" not in script
        assert json.dumps(_click_bindings()) in script
        assert json.dumps(ROLL_SELECTOR) in script

    def test_replaces_previous_listener(self):
        script = build_keyboard_script()
        assert "removeEventListener('keydown', state.handler)" in script
        assert "addEventListener('keydown', onKey)" in script

    def test_ignores_text_inputs(self):
        assert "'INPUT'" in build_keyboard_script()

    def test_category_pattern_reads_score_keys(self):
        script = build_keyboard_script()
        pattern = re.search(r"match\(/(.+?)/\)", script).group(1)
        match = re.search(pattern, "row st-key-score_full_house_r12 other")
        assert match.group(1) == "full_house"


class TestShortcutsMarkdown:
    def test_lists_every_shortcut(self):
        text = shortcuts_markdown()
        for shortcut in KEYBOARD_SHORTCUTS:
            assert f"`{shortcut.label}`" in text
            assert shortcut.description in text

    def test_is_a_table(self):
        lines = shortcuts_markdown().splitlines()
        assert lines[:2] == ["| Key | Action |", "|---|---|"]
        assert len(lines) == len(KEYBOARD_SHORTCUTS) + 2
