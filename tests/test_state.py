"""Tests for view-state toggles, layout ratio, reload, and the render plan."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from kanjiview.content import split_content
from kanjiview.errors import OpenError
from kanjiview.scroll import ScrollController
from kanjiview.state import DisplayMode, PaneSpec, ViewState

SAMPLE = "日:\n day, sun\n-\nニチ\n"


def _make_state(raw: str = SAMPLE, **kwargs) -> ViewState:
    return ViewState(document=split_content(raw), **kwargs)


class ViewStateDefaultsTests(unittest.TestCase):
    def test_fresh_state_uses_documented_defaults(self) -> None:
        state = _make_state()

        self.assertEqual(state.scroll_offset, 0)
        self.assertFalse(state.hidden)
        self.assertFalse(state.reverse)
        self.assertEqual(state.space_ratio, 40)
        self.assertFalse(state.should_exit)
        self.assertEqual(state.scroll.line_count, 4)

    def test_initial_space_ratio_is_clamped(self) -> None:
        self.assertEqual(_make_state(space_ratio=250).space_ratio, 100)
        self.assertEqual(_make_state(space_ratio=-5).space_ratio, 0)

    def test_scroll_down_clamps_to_last_line(self) -> None:
        state = _make_state("a:\nb\nc\n")
        for _ in range(10):
            state.scroll_down(1)

        self.assertEqual(state.scroll_offset, 2)


class RenderPlanTests(unittest.TestCase):
    def test_both_panes_shown_with_prompt_on_left(self) -> None:
        state = _make_state()
        plan = state.render_plan()

        self.assertEqual(plan.left_pane, PaneSpec(text=state.document.prompt_text, scroll_offset=0))
        self.assertEqual(plan.right_pane, PaneSpec(text=state.document.detail_text, scroll_offset=0))
        self.assertEqual((plan.left_width_pct, plan.right_width_pct), (40, 60))

    def test_reverse_swaps_pane_contents(self) -> None:
        state = _make_state()
        state.toggle_reverse()
        plan = state.render_plan()

        self.assertEqual(plan.left_pane.text, state.document.detail_text)
        self.assertEqual(plan.right_pane.text, state.document.prompt_text)

    def test_hiding_shows_one_pane_and_reverse_switches_it(self) -> None:
        state = _make_state()
        state.toggle_hidden()
        plan = state.render_plan()

        self.assertEqual(state.display_mode, DisplayMode.LEFT_ONLY)
        shown = [pane for pane in (plan.left_pane, plan.right_pane) if pane is not None]
        self.assertEqual(len(shown), 1)
        self.assertEqual(shown[0].text, state.document.prompt_text)

        state.toggle_reverse()
        plan = state.render_plan()
        shown = [pane for pane in (plan.left_pane, plan.right_pane) if pane is not None]
        self.assertEqual(len(shown), 1)
        self.assertEqual(shown[0].text, state.document.detail_text)

    def test_panes_share_scroll_offset(self) -> None:
        state = _make_state()
        state.scroll_down(2)
        plan = state.render_plan()

        self.assertEqual(plan.left_pane.scroll_offset, 2)
        self.assertEqual(plan.right_pane.scroll_offset, 2)

    def test_render_plan_does_not_mutate_state(self) -> None:
        state = _make_state()
        before = (state.scroll_offset, state.hidden, state.reverse, state.space_ratio)
        state.render_plan()
        state.render_plan()

        self.assertEqual((state.scroll_offset, state.hidden, state.reverse, state.space_ratio), before)


class ToggleAndRatioTests(unittest.TestCase):
    def test_double_toggles_restore_original_plan(self) -> None:
        state = _make_state()
        original = state.render_plan()

        state.toggle_hidden()
        state.toggle_hidden()
        self.assertEqual(state.render_plan(), original)

        state.toggle_reverse()
        state.toggle_reverse()
        self.assertEqual(state.render_plan(), original)

    def test_space_ratio_stays_within_percent_bounds(self) -> None:
        state = _make_state()
        for _ in range(30):
            state.adjust_space_ratio(5)
        self.assertEqual(state.space_ratio, 100)
        self.assertEqual(state.render_plan().right_width_pct, 0)

        for _ in range(30):
            state.adjust_space_ratio(-5)
        self.assertEqual(state.space_ratio, 0)
        self.assertEqual(state.render_plan().left_width_pct, 0)

    def test_exit_request_is_sticky(self) -> None:
        state = _make_state()
        state.request_exit()
        state.toggle_hidden()

        self.assertTrue(state.should_exit)


class ReloadTests(unittest.TestCase):
    def test_from_path_loads_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "kanji.txt"
            path.write_text(SAMPLE, encoding="utf-8")

            state = ViewState.from_path(path, space_ratio=55)

        self.assertEqual(state.path, path)
        self.assertEqual(state.line_count, 4)
        self.assertEqual(state.space_ratio, 55)

    def test_reload_replaces_document_and_clamps_scroll(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "kanji.txt"
            path.write_text("a:\nb\nc\nd\ne\n", encoding="utf-8")
            state = ViewState.from_path(path)
            state.scroll_down(4)
            state.request_reload()

            path.write_text("x:\ny\n", encoding="utf-8")
            state.reload()

        self.assertEqual(state.line_count, 2)
        self.assertEqual(state.scroll_offset, 1)
        self.assertEqual(state.document.prompt_lines, ["x:", ""])
        self.assertFalse(state.reload_requested)

    def test_reload_can_switch_to_another_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            first = Path(tmp) / "first.txt"
            second = Path(tmp) / "second.txt"
            first.write_text("a:\n", encoding="utf-8")
            second.write_text("b:\nc\n", encoding="utf-8")
            state = ViewState.from_path(first)

            state.reload(second)

        self.assertEqual(state.path, second)
        self.assertEqual(state.line_count, 2)

    def test_failed_reload_keeps_previous_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "kanji.txt"
            path.write_text(SAMPLE, encoding="utf-8")
            state = ViewState.from_path(path)
            path.unlink()

            with self.assertRaises(OpenError):
                state.reload()

        self.assertEqual(state.line_count, 4)

    def test_reload_without_path_is_a_noop(self) -> None:
        state = ViewState(scroll=ScrollController())
        state.request_reload()
        state.reload()

        self.assertFalse(state.reload_requested)
        self.assertEqual(state.line_count, 0)


if __name__ == "__main__":
    unittest.main()
