from __future__ import annotations

import pytest

from mdinput.domain.errors import (
    FormatError,
    InvalidSelectionError,
    InvalidTitleLevelError,
    UnsupportedActionError,
)
from mdinput.domain.models import FormatParams, MarkdownAction
from mdinput.services.format_engine import FormatEngine, apply_markdown

WRAPPING = [
    (MarkdownAction.BOLD, "**"),
    (MarkdownAction.ITALIC, "*"),
    (MarkdownAction.STRIKETHROUGH, "~~"),
]


# ------------------------------
# Wrapping actions
# ------------------------------


def test_bold_wraps_selection(engine: FormatEngine):
    r = engine.apply(MarkdownAction.BOLD, "hello world", 0, 5)
    assert r.text == "**hello** world"
    assert r.cursor_offset == 9
    assert r.collapse_back_by == 0


def test_bold_unwraps_when_markers_flank_selection(engine: FormatEngine):
    r = engine.apply(MarkdownAction.BOLD, "**hello** world", 2, 7)
    assert r.text == "hello world"
    assert r.cursor_offset == 5


def test_italic_on_empty_buffer_places_cursor_between_markers(engine: FormatEngine):
    r = engine.apply(MarkdownAction.ITALIC, "", 0, 0)
    assert r.text == "**"
    assert r.cursor_offset - r.collapse_back_by == 1


@pytest.mark.parametrize("action, marker", WRAPPING)
def test_wrap_then_unwrap_restores_text(engine: FormatEngine, action, marker):
    original = "some text here"
    wrapped = engine.apply(action, original, 5, 9)
    assert wrapped.text == f"some {marker}text{marker} here"
    assert len(wrapped.text) == len(original) + 2 * len(marker)

    n = len(marker)
    unwrapped = engine.apply(action, wrapped.text, 5 + n, 9 + n)
    assert unwrapped.text == original
    assert len(unwrapped.text) == len(wrapped.text) - 2 * n


@pytest.mark.parametrize("action, marker", WRAPPING)
def test_empty_selection_inserts_marker_pair_mid_text(engine: FormatEngine, action, marker):
    r = engine.apply(action, "ab", 1, 1)
    assert r.text == f"a{marker}{marker}b"
    assert r.collapse_back_by == len(marker)
    assert r.cursor_offset - r.collapse_back_by == 1 + len(marker)


def test_wrap_whole_buffer(engine: FormatEngine):
    r = engine.apply(MarkdownAction.STRIKETHROUGH, "gone", 0, 4)
    assert r.text == "~~gone~~"
    assert r.cursor_offset == 8


def test_selection_at_buffer_start_is_never_treated_as_wrapped(engine: FormatEngine):
    # "**" at the end must not be matched against text[-2:0].
    r = engine.apply(MarkdownAction.BOLD, "ab**", 0, 2)
    assert r.text == "**ab****"


def test_marker_only_on_one_side_wraps_again(engine: FormatEngine):
    r = engine.apply(MarkdownAction.BOLD, "**hello world", 2, 7)
    assert r.text == "****hello** world"


def test_italic_inside_bold_peels_one_star(engine: FormatEngine):
    # Peek-based toggle: a single '*' on each side counts as italic markers.
    r = engine.apply(MarkdownAction.ITALIC, "**hello**", 2, 7)
    assert r.text == "*hello*"
    assert r.cursor_offset == 6


# ------------------------------
# Title
# ------------------------------


def test_title_applies_to_every_selected_line(engine: FormatEngine):
    text = "first\nsecond"
    r = engine.apply(MarkdownAction.TITLE, text, 0, len(text), FormatParams(title_level=2))
    assert r.text == "## first\n## second"
    assert r.cursor_offset == len(r.text)


def test_title_same_level_toggles_off(engine: FormatEngine):
    r = engine.apply(MarkdownAction.TITLE, "## first", 3, 8, FormatParams(title_level=2))
    assert r.text == "first"
    assert r.cursor_offset == 5


def test_title_other_level_replaces_prefix(engine: FormatEngine):
    r = engine.apply(MarkdownAction.TITLE, "### deep", 4, 8, FormatParams(title_level=1))
    assert r.text == "# deep"


def test_title_level_is_exact_not_prefix_match(engine: FormatEngine):
    # "### x" is not a level-2 heading, so H2 converts instead of stripping.
    r = engine.apply(MarkdownAction.TITLE, "### x", 4, 5, FormatParams(title_level=2))
    assert r.text == "## x"


def test_overlong_hash_run_is_replaced(engine: FormatEngine):
    r = engine.apply(MarkdownAction.TITLE, "####### x", 8, 9, FormatParams(title_level=2))
    assert r.text == "## x"


def test_title_on_collapsed_cursor_places_caret_after_prefix(engine: FormatEngine):
    text = "one\ntwo\nthree"
    r = engine.apply(MarkdownAction.TITLE, text, 6, 6, FormatParams(title_level=3))
    assert r.text == "one\n### two\nthree"
    assert r.cursor_offset == 4 + len("### ")
    assert r.collapse_back_by == 0


def test_title_toggle_off_on_collapsed_cursor(engine: FormatEngine):
    r = engine.apply(MarkdownAction.TITLE, "a\n# b", 4, 4)
    assert r.text == "a\nb"
    assert r.cursor_offset == 2


def test_title_on_empty_buffer(engine: FormatEngine):
    r = engine.apply(MarkdownAction.TITLE, "", 0, 0, FormatParams(title_level=6))
    assert r.text == "###### "
    assert r.cursor_offset == 7


def test_hash_without_space_is_not_a_heading(engine: FormatEngine):
    r = engine.apply(MarkdownAction.TITLE, "#tag", 0, 0)
    assert r.text == "# #tag"


def test_title_mixed_lines_toggle_independently(engine: FormatEngine):
    text = "# a\nb"
    r = engine.apply(MarkdownAction.TITLE, text, 0, len(text))
    assert r.text == "a\n# b"


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
def test_title_twice_is_identity(engine: FormatEngine, level: int):
    text = "intro\nbody line\noutro"
    params = FormatParams(title_level=level)
    once = engine.apply(MarkdownAction.TITLE, text, 8, 10, params)
    prefix = "#" * level + " "
    assert once.text == f"intro\n{prefix}body line\noutro"
    twice = engine.apply(MarkdownAction.TITLE, once.text, 8 + len(prefix), 10 + len(prefix), params)
    assert twice.text == text


@pytest.mark.parametrize("level", [0, 7, -1, True, "2"])
def test_invalid_title_level_raises(engine: FormatEngine, level):
    with pytest.raises(InvalidTitleLevelError):
        engine.apply(MarkdownAction.TITLE, "x", 0, 1, FormatParams(title_level=level))


# ------------------------------
# List
# ------------------------------


def test_list_prefixes_only_middle_line_and_toggles_back(engine: FormatEngine):
    text = "a\nb\nc"
    once = engine.apply(MarkdownAction.LIST, text, 2, 3)
    assert once.text == "a\n- b\nc"
    twice = engine.apply(MarkdownAction.LIST, once.text, 4, 5)
    assert twice.text == text


def test_selection_ending_after_newline_leaves_next_line_alone(engine: FormatEngine):
    text = "a\nb\nc"
    # "a\n" selected: zero characters of "b" are covered.
    r = engine.apply(MarkdownAction.LIST, text, 0, 2)
    assert r.text == "- a\nb\nc"


def test_list_lines_outside_selection_are_unchanged(engine: FormatEngine):
    text = "keep\nx1\nx2\nkeep too"
    r = engine.apply(MarkdownAction.LIST, text, 6, 9)
    assert r.text == "keep\n- x1\n- x2\nkeep too"
    assert r.cursor_offset == len("keep\n- x1\n- x2")


def test_list_on_collapsed_cursor_at_line_end(engine: FormatEngine):
    r = engine.apply(MarkdownAction.LIST, "item", 4, 4)
    assert r.text == "- item"
    assert r.cursor_offset == 2


def test_list_handles_blank_lines(engine: FormatEngine):
    text = "a\n\nb"
    r = engine.apply(MarkdownAction.LIST, text, 0, len(text))
    assert r.text == "- a\n- \n- b"


# ------------------------------
# Link
# ------------------------------


def test_link_uses_selection_as_label(engine: FormatEngine):
    r = engine.apply(
        MarkdownAction.LINK, "click here", 6, 10, FormatParams(link_url="https://x.io")
    )
    assert r.text == "click [here](https://x.io)"
    assert r.cursor_offset == len(r.text)
    assert r.collapse_back_by == 0


def test_link_label_override(engine: FormatEngine):
    r = engine.apply(
        MarkdownAction.LINK,
        "see docs now",
        4,
        8,
        FormatParams(link_url="https://d.io", selected_text="the docs"),
    )
    assert r.text == "see [the docs](https://d.io) now"
    assert r.cursor_offset == len("see [the docs](https://d.io)")


def test_link_on_empty_selection_without_url(engine: FormatEngine):
    r = engine.apply(MarkdownAction.LINK, "ab", 1, 1)
    assert r.text == "a[]()b"
    assert r.cursor_offset == 5
    assert r.collapse_back_by == 0


def test_empty_override_wins_over_selection(engine: FormatEngine):
    r = engine.apply(MarkdownAction.LINK, "word", 0, 4, FormatParams(selected_text=""))
    assert r.text == "[]()"


# ------------------------------
# Errors & determinism
# ------------------------------


@pytest.mark.parametrize("start, end", [(-1, 0), (3, 2), (0, 6), (6, 6)])
def test_invalid_selection_raises(engine: FormatEngine, start: int, end: int):
    with pytest.raises(InvalidSelectionError) as info:
        engine.apply(MarkdownAction.BOLD, "hello", start, end)
    assert info.value.length == 5


def test_unknown_action_raises(engine: FormatEngine):
    with pytest.raises(UnsupportedActionError):
        engine.apply("bold", "hello", 0, 1)  # type: ignore[arg-type]


def test_errors_share_a_value_error_base(engine: FormatEngine):
    with pytest.raises(ValueError):
        engine.apply(MarkdownAction.BOLD, "", 0, 1)
    assert issubclass(UnsupportedActionError, FormatError)


def test_module_shortcut_is_deterministic():
    a = apply_markdown(MarkdownAction.BOLD, "hello world", 0, 5)
    b = apply_markdown(MarkdownAction.BOLD, "hello world", 0, 5)
    assert a == b
