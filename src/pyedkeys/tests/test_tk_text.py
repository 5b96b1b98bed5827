# ---------------------------------------------------------------------------
# File: test_tk_text.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for TkTextResolver.
#
# Notes:
#	- Avoid real Tk widgets (no display in CI).
#	- A fake text widget stands in for tk.Text: it records bindings, answers
#	  bind_class/event_info queries and runs bindings on event_generate.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial tests
# 01/11/2026	Paul G. LeDuc				Emacs sequences + refresh_bindings
# 01/14/2026	Paul G. LeDuc				Insert left to Tk; match on raw Tk state
# ---------------------------------------------------------------------------

from __future__ import annotations

from types import SimpleNamespace

import pytest

pytest.importorskip("tkinter")

from pyedkeys.bindings import keysyms as k
from pyedkeys.bindings.keysyms import CONTROL_MASK, LOCK_MASK, SHIFT_MASK
from pyedkeys.errors import ReentrantResolutionError
from pyedkeys.native.base import KeyPress
from pyedkeys.native.tk_text import TkTextResolver


X11_VIRTUAL_EVENTS: dict[str, tuple[str, ...]] = {
	"<<Cut>>": ("<Control-Key-x>", "<Key-F20>"),
	"<<Copy>>": ("<Control-Key-c>", "<Key-F16>"),
	"<<Paste>>": ("<Control-Key-v>", "<Key-F18>"),
	"<<SelectAll>>": ("<Control-Key-slash>",),
	"<<SelectNone>>": ("<Control-Key-backslash>",),
	"<<PrevChar>>": ("<Key-Left>",),
	"<<SelectPrevChar>>": ("<Shift-Key-Left>",),
	"<<PrevWord>>": ("<Control-Key-Left>",),
	"<<SelectPrevWord>>": ("<Control-Shift-Key-Left>",),
	"<<NextLine>>": ("<Key-Down>",),
	"<<PrevPara>>": ("<Control-Key-Up>",),
	"<<SelectNextPara>>": ("<Control-Shift-Key-Down>",),
	"<<ToggleSelection>>": ("<Control-ButtonPress-1>",),
}

TEXT_CLASS_BINDINGS = (
	"<Key-Prior>",
	"<Shift-Key-Next>",
	"<Control-Key-End>",
	"<Key-BackSpace>",
	"<Control-Key-b>",
	"<Key-Insert>",
)


class _FakeText:
	def __init__(
		self,
		class_bindings: tuple[str, ...] = TEXT_CLASS_BINDINGS,
		virtual: dict[str, tuple[str, ...]] | None = None,
	) -> None:
		self.class_bindings = set(class_bindings)
		self.virtual = dict(X11_VIRTUAL_EVENTS if virtual is None else virtual)
		self.bindings: dict[str, object] = {}
		self.generated: list[tuple[str, dict]] = []
		self.results: list[object] = []

	def bind(self, sequence, func):
		self.bindings[sequence] = func

	def bind_class(self, class_name, sequence):
		if class_name == "Text" and sequence in self.class_bindings:
			return "tk::TextSetCursor %W insert"
		return ""

	def event_info(self, virtual):
		return self.virtual.get(virtual, ())

	def event_generate(self, sequence, **kw):
		self.generated.append((sequence, kw))
		self.results.append(self.bindings[sequence](SimpleNamespace()))


def _resolver(**kw) -> tuple[TkTextResolver, _FakeText]:
	widget = kw.pop("widget", None) or _FakeText()
	return TkTextResolver(widget=widget, **kw), widget


def test_requires_master_or_widget():
	with pytest.raises(ValueError):
		TkTextResolver()


def test_virtual_events_always_bound_class_sequences_only_when_present():
	r, w = _resolver()
	seqs = r.intercepted_sequences()

	assert "<<PrevWord>>" in seqs
	assert "<<NextWord>>" in seqs  # no definition here, still bound
	assert "<Key-Prior>" in seqs
	assert "<Key-BackSpace>" in seqs
	assert "<Key-Delete>" not in seqs
	assert "<Control-Key-b>" not in seqs  # Emacs sequences are opt-in
	assert set(w.bindings) == set(seqs)


def test_virtual_event_dispatch_through_widget():
	r, w = _resolver()

	cmds = r.resolve(KeyPress(k.KEY_Left, CONTROL_MASK))

	assert cmds == ["MoveWordBackward"]
	assert w.generated == [("<<PrevWord>>", {"when": "now"})]
	assert w.results == ["break"]


def test_most_specific_virtual_event_wins():
	r, _ = _resolver()

	assert r.resolve(KeyPress(k.KEY_Left, 0)) == ["MoveLeft"]
	assert r.resolve(KeyPress(k.KEY_Left, SHIFT_MASK)) == ["MoveBackwardAndModifySelection"]
	assert r.resolve(KeyPress(k.KEY_Left, CONTROL_MASK | SHIFT_MASK)) == [
		"MoveWordBackwardAndModifySelection"
	]


def test_lock_bit_does_not_block_match():
	r, _ = _resolver()

	assert r.resolve(KeyPress(k.KEY_Left, CONTROL_MASK | LOCK_MASK)) == ["MoveWordBackward"]


def test_clipboard_and_selection_virtual_events():
	r, _ = _resolver()

	assert r.resolve(KeyPress(k.KEY_x, CONTROL_MASK)) == ["Cut"]
	assert r.resolve(KeyPress(k.KEYSYM_VALUES["F16"], 0)) == ["Copy"]
	assert r.resolve(KeyPress(k.KEY_v, CONTROL_MASK)) == ["Paste"]
	assert r.resolve(KeyPress(k.KEY_slash, CONTROL_MASK)) == ["SelectAll"]
	assert r.resolve(KeyPress(k.KEY_backslash, CONTROL_MASK)) == ["Unselect"]


def test_paragraph_move_without_selection_has_no_command():
	r, w = _resolver()

	assert r.resolve(KeyPress(k.KEY_Up, CONTROL_MASK)) == []
	assert w.generated[-1][0] == "<<PrevPara>>"
	assert r.resolve(KeyPress(k.KEY_Down, CONTROL_MASK | SHIFT_MASK)) == [
		"MoveParagraphForwardAndModifySelection"
	]


def test_physical_class_sequences_dispatch_directly():
	r, w = _resolver()

	assert r.resolve(KeyPress(k.KEY_Page_Up, 0)) == ["MovePageUp"]
	assert r.resolve(KeyPress(k.KEY_Page_Down, SHIFT_MASK)) == ["MovePageDownAndModifySelection"]
	assert r.resolve(KeyPress(k.KEY_End, CONTROL_MASK)) == ["MoveToEndOfDocument"]
	assert r.resolve(KeyPress(k.KEY_BackSpace, 0)) == ["DeleteBackward"]
	assert w.generated == []


def test_unbound_key_returns_empty_without_generating():
	r, w = _resolver()

	assert r.resolve(KeyPress(k.KEY_Delete, 0)) == []
	assert r.resolve(KeyPress(k.KEY_b, CONTROL_MASK)) == []
	assert r.resolve(KeyPress(0, 0)) == []
	assert w.generated == []


def test_emacs_bindings_opt_in():
	r, _ = _resolver(emacs_bindings=True)

	assert "<Control-Key-b>" in r.intercepted_sequences()
	assert "<Control-Key-f>" not in r.intercepted_sequences()  # Text class does not bind it here
	assert r.resolve(KeyPress(k.KEY_b, CONTROL_MASK)) == ["MoveBackward"]


def test_binding_fired_outside_resolve_is_suppressed_and_silent():
	r, w = _resolver()

	assert w.bindings["<<Cut>>"](SimpleNamespace()) == "break"
	assert r.resolve(KeyPress(k.KEY_Down, 0)) == ["MoveDown"]


def test_reentrant_resolve_raises_and_recovers():
	class _ReentrantText(_FakeText):
		resolver: TkTextResolver | None = None

		def event_generate(self, sequence, **kw):
			assert self.resolver is not None
			self.resolver.resolve(KeyPress(k.KEY_Left, 0))

	w = _ReentrantText()
	r = TkTextResolver(widget=w)
	w.resolver = r

	with pytest.raises(ReentrantResolutionError):
		r.resolve(KeyPress(k.KEY_Left, CONTROL_MASK))

	# Physical sequences do not go through event_generate.
	assert r.resolve(KeyPress(k.KEY_Page_Up, 0)) == ["MovePageUp"]


def test_refresh_bindings_picks_up_new_virtual_definitions():
	r, w = _resolver()
	assert r.resolve(KeyPress(k.KEY_Right, CONTROL_MASK)) == []

	w.virtual["<<NextWord>>"] = ("<Control-Key-Right>",)
	r.refresh_bindings()

	assert r.resolve(KeyPress(k.KEY_Right, CONTROL_MASK)) == ["MoveWordForward"]


def test_accepts_tk_shaped_events():
	r, _ = _resolver()
	event = SimpleNamespace(keysym_num=k.KEY_Left, state=CONTROL_MASK, keysym="Left")

	assert r.resolve(event) == ["MoveWordBackward"]


def test_close_stops_interception():
	r, _ = _resolver()
	r.close()
	r.close()

	assert r.intercepted_sequences() == []
	assert r.resolve(KeyPress(k.KEY_Left, CONTROL_MASK)) == []



def test_insert_is_left_to_the_text_class():
	r, w = _resolver()

	assert "<Key-Insert>" not in r.intercepted_sequences()
	assert r.resolve(KeyPress(k.KEY_Insert, 0)) == []
	assert w.generated == []


def test_matches_on_raw_tk_state():
	r, _ = _resolver()

	# Windows NumLock (0x8) is an extra held modifier for Tk; Control-Left
	# still matches.
	win = SimpleNamespace(keysym_num=k.KEY_Left, state=CONTROL_MASK | 0x8, keysym="Left")
	key = KeyPress.from_tk_event(win, "win32")

	assert key.state == CONTROL_MASK
	assert r.resolve(key) == ["MoveWordBackward"]

	# Only the raw state carries Control here.
	assert r.resolve(KeyPress(k.KEY_Left, 0, "Left", CONTROL_MASK)) == ["MoveWordBackward"]
