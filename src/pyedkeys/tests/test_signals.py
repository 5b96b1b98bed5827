# ---------------------------------------------------------------------------
# File: test_signals.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for EditingSignals (editing signal -> command names).
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial tests
# 01/10/2026	Paul G. LeDuc				Add emit() + swallowed signal coverage
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyedkeys.bindings.tables import DeleteType, MovementStep
from pyedkeys.native.signals import EditingSignals


def _run(signal: str, *args) -> list[str]:
	s = EditingSignals()
	s.emit(signal, *args)
	return s.drain()


def test_simple_signals():
	assert _run("backspace") == ["DeleteBackward"]
	assert _run("select-all", True) == ["SelectAll"]
	assert _run("select-all", False) == ["Unselect"]
	assert _run("cut-clipboard") == ["Cut"]
	assert _run("copy-clipboard") == ["Copy"]
	assert _run("paste-clipboard") == ["Paste"]
	assert _run("toggle-overwrite") == ["OverWrite"]
	assert _run("insert-emoji") == ["GtkInsertEmoji"]


def test_popup_menu_and_show_help_are_swallowed():
	assert _run("popup-menu") == []
	assert _run("show-help") == []


def test_unknown_signal_raises_keyerror():
	with pytest.raises(KeyError):
		EditingSignals().emit("preedit-changed")


def test_move_cursor_direction_and_extend():
	assert _run("move-cursor", MovementStep.WORDS, -1, False) == ["MoveWordBackward"]
	assert _run("move-cursor", MovementStep.WORDS, 1, False) == ["MoveWordForward"]
	assert _run("move-cursor", MovementStep.WORDS, -1, True) == ["MoveWordBackwardAndModifySelection"]
	assert _run("move-cursor", MovementStep.WORDS, 1, True) == ["MoveWordForwardAndModifySelection"]


def test_move_cursor_repeats_abs_count():
	assert _run("move-cursor", MovementStep.DISPLAY_LINES, 3, False) == ["MoveDown"] * 3
	assert _run("move-cursor", MovementStep.PAGES, -2, True) == ["MovePageUpAndModifySelection"] * 2


def test_move_cursor_zero_count_is_backward_with_no_repeats():
	assert _run("move-cursor", MovementStep.WORDS, 0, False) == []


def test_move_cursor_empty_cell_and_out_of_range_step_emit_nothing():
	assert _run("move-cursor", MovementStep.PARAGRAPHS, 1, False) == []
	assert _run("move-cursor", MovementStep.PARAGRAPHS, 1, True) == ["MoveParagraphForwardAndModifySelection"]
	assert _run("move-cursor", MovementStep.HORIZONTAL_PAGES, 1, False) == []
	assert _run("move-cursor", 42, 1, False) == []


def test_delete_words_backward_anchors_then_deletes():
	assert _run("delete-from-cursor", DeleteType.WORDS, -2) == [
		"MoveWordForward",
		"MoveWordBackward",
		"DeleteWordBackward",
		"DeleteWordBackward",
	]


def test_delete_words_forward_anchors_then_deletes():
	assert _run("delete-from-cursor", DeleteType.WORDS, 2) == [
		"MoveWordBackward",
		"MoveWordForward",
		"DeleteWordForward",
		"DeleteWordForward",
	]


def test_delete_line_and_paragraph_move_to_boundary_once():
	assert _run("delete-from-cursor", DeleteType.DISPLAY_LINES, 2) == [
		"MoveToEndOfLine",
		"DeleteToEndOfLine",
		"DeleteToEndOfLine",
	]
	assert _run("delete-from-cursor", DeleteType.PARAGRAPHS, -1) == [
		"MoveToBeginningOfParagraph",
		"DeleteToBeginningOfParagraph",
	]


def test_delete_chars_and_word_ends_have_no_anchor():
	assert _run("delete-from-cursor", DeleteType.CHARS, 3) == ["DeleteForward"] * 3
	assert _run("delete-from-cursor", DeleteType.WORD_ENDS, -1) == ["DeleteWordBackward"]


def test_delete_whitespace_has_no_command():
	assert _run("delete-from-cursor", DeleteType.WHITESPACE, 1) == []


def test_delete_out_of_range_type_is_ignored():
	assert _run("delete-from-cursor", 17, 1) == []


def test_commands_accumulate_across_signals_until_drained():
	s = EditingSignals()
	s.backspace()
	s.move_cursor(MovementStep.WORDS, 1)

	assert s.drain() == ["DeleteBackward", "MoveWordForward"]
	assert s.commands == []
