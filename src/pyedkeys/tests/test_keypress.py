# ---------------------------------------------------------------------------
# File: test_keypress.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for KeyPress and Tk modifier state mapping.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency. A fake widget answers
#	  `tk windowingsystem` the way a live tkinter widget does.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from types import SimpleNamespace

import pytest

from pyedkeys.bindings import keysyms as k
from pyedkeys.bindings.keysyms import CONTROL_MASK, LOCK_MASK, MOD1_MASK, SHIFT_MASK
from pyedkeys.native import base
from pyedkeys.native.base import (
	TK_AQUA_COMMAND,
	TK_AQUA_OPTION,
	TK_WIN32_ALT,
	TK_WIN32_NUMLOCK,
	TK_WIN32_SCROLLLOCK,
	KeyPress,
	NullResolver,
	tk_state_to_mask,
	windowing_system_of,
)
from pyedkeys.translator import KeyBindingTranslator


class _FakeInterp:
	def __init__(self, windowing: str) -> None:
		self.windowing = windowing

	def call(self, *args):
		assert args == ("tk", "windowingsystem")
		return self.windowing


def _event(keyval: int, state: int, windowing: str) -> SimpleNamespace:
	widget = SimpleNamespace(tk=_FakeInterp(windowing))
	return SimpleNamespace(keysym_num=keyval, state=state, keysym="", widget=widget)


# ---------------------------------------------------------------------------
# tk_state_to_mask
# ---------------------------------------------------------------------------

def test_x11_state_is_unchanged():
	state = SHIFT_MASK | CONTROL_MASK | MOD1_MASK | LOCK_MASK

	assert tk_state_to_mask(state, "x11") == state


def test_win32_drops_lock_keys_and_maps_alt():
	assert tk_state_to_mask(TK_WIN32_NUMLOCK, "win32") == 0
	assert tk_state_to_mask(CONTROL_MASK | TK_WIN32_NUMLOCK | TK_WIN32_SCROLLLOCK, "win32") == CONTROL_MASK
	assert tk_state_to_mask(TK_WIN32_ALT, "win32") == MOD1_MASK
	assert tk_state_to_mask(TK_WIN32_ALT | TK_WIN32_NUMLOCK | SHIFT_MASK, "win32") == MOD1_MASK | SHIFT_MASK
	assert tk_state_to_mask(LOCK_MASK, "win32") == LOCK_MASK


def test_aqua_maps_option_and_drops_command():
	assert tk_state_to_mask(TK_AQUA_OPTION, "aqua") == MOD1_MASK
	assert tk_state_to_mask(TK_AQUA_COMMAND, "aqua") == 0
	assert tk_state_to_mask(TK_AQUA_COMMAND | TK_AQUA_OPTION | SHIFT_MASK, "aqua") == MOD1_MASK | SHIFT_MASK


# ---------------------------------------------------------------------------
# windowing_system_of / from_tk_event
# ---------------------------------------------------------------------------

def test_windowing_system_asks_the_widget():
	assert windowing_system_of(_event(k.KEY_a, 0, "aqua")) == "aqua"


def test_windowing_system_falls_back_to_platform(monkeypatch):
	ev = SimpleNamespace(widget=".!text")

	monkeypatch.setattr(base, "sys", SimpleNamespace(platform="win32"))
	assert windowing_system_of(ev) == "win32"

	monkeypatch.setattr(base, "sys", SimpleNamespace(platform="darwin"))
	assert windowing_system_of(ev) == "aqua"

	monkeypatch.setattr(base, "sys", SimpleNamespace(platform="linux"))
	assert windowing_system_of(ev) == "x11"


def test_from_tk_event_keeps_raw_state_for_native_matching():
	key = KeyPress.from_tk_event(_event(k.KEY_b, CONTROL_MASK | TK_WIN32_NUMLOCK, "win32"))

	assert key.state == CONTROL_MASK
	assert key.tk_state == CONTROL_MASK | TK_WIN32_NUMLOCK
	assert key.native_state == CONTROL_MASK | TK_WIN32_NUMLOCK


def test_explicit_windowing_system_wins():
	ev = _event(k.KEY_Escape, TK_WIN32_NUMLOCK, "win32")

	assert KeyPress.from_tk_event(ev, "x11").state == MOD1_MASK


def test_unknown_windowing_system_raises():
	with pytest.raises(ValueError):
		KeyPress.from_tk_event(_event(k.KEY_a, 0, "wayland"))


def test_keypress_passes_through_and_defaults_native_state():
	key = KeyPress(k.KEY_Left, CONTROL_MASK)

	assert KeyPress.from_tk_event(key) is key
	assert key.native_state == CONTROL_MASK


def test_from_tk_event_tolerates_string_state():
	ev = SimpleNamespace(keysym_num=k.KEY_a, state="??", keysym="a")

	assert KeyPress.from_tk_event(ev, "x11") == KeyPress(k.KEY_a, 0, "a", 0)
	assert KeyPress.from_tk_event(SimpleNamespace(), "x11") == KeyPress(0, 0, "", 0)


# ---------------------------------------------------------------------------
# Through the translator
# ---------------------------------------------------------------------------

def test_windows_numlock_does_not_break_table_lookups():
	t = KeyBindingTranslator(NullResolver())

	assert t.commands_for_event(_event(k.KEY_Escape, TK_WIN32_NUMLOCK, "win32")) == ["Cancel"]
	assert t.commands_for_event(_event(k.KEY_Return, TK_WIN32_NUMLOCK, "win32")) == ["InsertNewLine"]
	assert t.commands_for_event(_event(k.KEY_b, CONTROL_MASK | TK_WIN32_NUMLOCK, "win32")) == ["ToggleBold"]


def test_windows_alt_counts_as_alt():
	t = KeyBindingTranslator(NullResolver())

	# No table entry uses Alt, so Alt+Escape is not plain Escape.
	assert t.commands_for_event(_event(k.KEY_Escape, TK_WIN32_ALT, "win32")) == []


def test_aqua_command_and_option():
	t = KeyBindingTranslator(NullResolver())

	assert t.commands_for_event(_event(k.KEY_b, CONTROL_MASK | TK_AQUA_COMMAND, "aqua")) == ["ToggleBold"]
	assert t.commands_for_event(_event(k.KEY_Escape, TK_AQUA_OPTION, "aqua")) == []
