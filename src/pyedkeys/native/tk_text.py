# ---------------------------------------------------------------------------
# File: tk_text.py
# ---------------------------------------------------------------------------
# Description:
#	Tk-backed native resolver for pyedkeys.
#
# Notes:
#	- Keeps one hidden tk.Text (inside a withdrawn Toplevel) per resolver and
#	  reuses its key bindings: Tk defines the editing virtual events
#	  (<<PrevWord>>, <<Cut>>, ...) per windowing system, so the platform's own
#	  conventions come along for free.
#	- Every recognized sequence gets an instance binding on the hidden widget.
#	  The binding feeds the matching editing signal to the active
#	  EditingSignals and returns "break", so the Text class bindings never
#	  run and the hidden widget never changes.
#	- Physical sequences are registered only when the Text class binds them on
#	  this platform.
#	- Does not own the Tk root or the event loop.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# 01/11/2026	Paul G. LeDuc				Optional Emacs-style class sequences
# 01/12/2026	Paul G. LeDuc				Cache candidates; add refresh_bindings()
# 01/14/2026	Paul G. LeDuc				Match on raw Tk state; leave Insert to Tk
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import tkinter as tk

from pyedkeys.bindings.tables import DeleteType, MovementStep
from pyedkeys.core.logging import get_lib_logger
from pyedkeys.errors import ReentrantResolutionError
from pyedkeys.native.base import KeyPress
from pyedkeys.native.sequences import KeyPattern, best_match, is_virtual, parse_sequence
from pyedkeys.native.signals import EditingSignals


# (signal name, signal args)
SignalSpec = tuple[str, tuple[Any, ...]]


def _move(step: MovementStep, count: int, extend: bool = False) -> SignalSpec:
	return ("move-cursor", (step, count, extend))


def _delete(delete_type: DeleteType, count: int) -> SignalSpec:
	return ("delete-from-cursor", (delete_type, count))


_V = MovementStep.VISUAL_POSITIONS
_L = MovementStep.LOGICAL_POSITIONS
_W = MovementStep.WORDS
_LINE = MovementStep.DISPLAY_LINES
_LINE_END = MovementStep.DISPLAY_LINE_ENDS
_PARA = MovementStep.PARAGRAPHS
_PAGE = MovementStep.PAGES
_BUF = MovementStep.BUFFER_ENDS


VIRTUAL_EVENT_SIGNALS: dict[str, SignalSpec] = {
	"<<Cut>>": ("cut-clipboard", ()),
	"<<Copy>>": ("copy-clipboard", ()),
	"<<Paste>>": ("paste-clipboard", ()),
	"<<SelectAll>>": ("select-all", (True,)),
	"<<SelectNone>>": ("select-all", (False,)),
	"<<PrevChar>>": _move(_V, -1),
	"<<NextChar>>": _move(_V, 1),
	"<<SelectPrevChar>>": _move(_V, -1, True),
	"<<SelectNextChar>>": _move(_V, 1, True),
	"<<PrevWord>>": _move(_W, -1),
	"<<NextWord>>": _move(_W, 1),
	"<<SelectPrevWord>>": _move(_W, -1, True),
	"<<SelectNextWord>>": _move(_W, 1, True),
	"<<PrevLine>>": _move(_LINE, -1),
	"<<NextLine>>": _move(_LINE, 1),
	"<<SelectPrevLine>>": _move(_LINE, -1, True),
	"<<SelectNextLine>>": _move(_LINE, 1, True),
	"<<LineStart>>": _move(_LINE_END, -1),
	"<<LineEnd>>": _move(_LINE_END, 1),
	"<<SelectLineStart>>": _move(_LINE_END, -1, True),
	"<<SelectLineEnd>>": _move(_LINE_END, 1, True),
	"<<PrevPara>>": _move(_PARA, -1),
	"<<NextPara>>": _move(_PARA, 1),
	"<<SelectPrevPara>>": _move(_PARA, -1, True),
	"<<SelectNextPara>>": _move(_PARA, 1, True),
}

# Bound directly by the Text class rather than through virtual events.
# Insert is not here: the Text class pastes PRIMARY on it, it does not
# toggle overwrite.
CLASS_SEQUENCE_SIGNALS: dict[str, SignalSpec] = {
	"<Key-Prior>": _move(_PAGE, -1),
	"<Key-Next>": _move(_PAGE, 1),
	"<Shift-Key-Prior>": _move(_PAGE, -1, True),
	"<Shift-Key-Next>": _move(_PAGE, 1, True),
	"<Control-Key-Home>": _move(_BUF, -1),
	"<Control-Key-End>": _move(_BUF, 1),
	"<Control-Shift-Key-Home>": _move(_BUF, -1, True),
	"<Control-Shift-Key-End>": _move(_BUF, 1, True),
	"<Key-Delete>": _delete(DeleteType.CHARS, 1),
	"<Key-BackSpace>": ("backspace", ()),
}

EMACS_SEQUENCE_SIGNALS: dict[str, SignalSpec] = {
	"<Control-Key-a>": _move(_LINE_END, -1),
	"<Control-Key-e>": _move(_LINE_END, 1),
	"<Control-Key-b>": _move(_L, -1),
	"<Control-Key-f>": _move(_L, 1),
	"<Control-Key-p>": _move(_LINE, -1),
	"<Control-Key-n>": _move(_LINE, 1),
	"<Control-Key-d>": _delete(DeleteType.CHARS, 1),
	"<Control-Key-h>": ("backspace", ()),
	"<Control-Key-k>": _delete(DeleteType.PARAGRAPH_ENDS, 1),
	"<Meta-Key-b>": _move(_W, -1),
	"<Meta-Key-f>": _move(_W, 1),
	"<Meta-Key-less>": _move(_BUF, -1),
	"<Meta-Key-greater>": _move(_BUF, 1),
	"<Meta-Key-d>": _delete(DeleteType.WORD_ENDS, 1),
	"<Meta-Key-BackSpace>": _delete(DeleteType.WORD_ENDS, -1),
}


class TkTextResolver:
	"""
	TkTextResolver

	NativeResolver backed by a hidden tk.Text.

	The widget supplies the bindings, not the matching. Which sequences are
	live comes from the Text class (`bind_class`) and the current virtual
	event definitions (`event_info`); picking the sequence for a key is done
	here with Tk's rules (see native/sequences.py), no real <KeyPress> is
	sent to the widget. A picked virtual event is then fired with
	event_generate so the widget's instance binding runs; a picked physical
	sequence has its signal emitted directly.

	Args:
		master:			Any Tk widget; the hidden Toplevel is created under it.
		widget:			Pre-built text widget to use instead (tests, embedding).
		emacs_bindings:	Also intercept the Emacs-style Text class sequences.
	"""

	def __init__(
		self,
		master: Optional[tk.Misc] = None,
		*,
		widget: Any = None,
		emacs_bindings: bool = False,
		logger: Optional[logging.Logger] = None,
	) -> None:
		self._log = logger or get_lib_logger("native.tk")
		self._toplevel: Optional[tk.Toplevel] = None

		if widget is None:
			if master is None:
				raise ValueError("TkTextResolver needs a Tk master or a text widget")
			self._toplevel = tk.Toplevel(master)
			self._toplevel.withdraw()
			widget = tk.Text(self._toplevel)

		self._widget = widget
		self._active: Optional[EditingSignals] = None
		self._signals: dict[str, SignalSpec] = {}
		self._candidates: list[tuple[KeyPattern, str]] = []

		self._register(CLASS_SEQUENCE_SIGNALS, require_class_binding=True)
		if emacs_bindings:
			self._register(EMACS_SEQUENCE_SIGNALS, require_class_binding=True)
		self._register(VIRTUAL_EVENT_SIGNALS, require_class_binding=False)

		self.refresh_bindings()

		self._log.info(
			"Native text widget ready: %d sequences intercepted, %d key patterns",
			len(self._signals),
			len(self._candidates),
		)

	# -----------------------------------------------------------------------
	# NativeResolver
	# -----------------------------------------------------------------------

	def resolve(self, event: Any) -> list[str]:
		"""
		Run the hidden widget's binding for `event` and return the commands
		its editing signals produced.
		"""
		if self._active is not None:
			raise ReentrantResolutionError(
				"TkTextResolver.resolve() called while a resolution is in flight"
			)

		key = KeyPress.from_tk_event(event)
		sequence = best_match(self._candidates, key.keyval, key.native_state)
		if sequence is None:
			return []

		signals = EditingSignals()
		self._active = signals
		try:
			if is_virtual(sequence):
				self._widget.event_generate(sequence, when="now")
			else:
				self._emit(sequence)
		finally:
			self._active = None

		commands = signals.drain()
		self._log.debug("Native binding %s -> %s", sequence, commands)
		return commands

	# -----------------------------------------------------------------------
	# Binding management
	# -----------------------------------------------------------------------

	def intercepted_sequences(self) -> list[str]:
		return list(self._signals)

	def refresh_bindings(self) -> None:
		"""
		Rebuild the key patterns from the current virtual event definitions.

		Call after the host application changes them with `event add`.
		"""
		candidates: list[tuple[KeyPattern, str]] = []

		# Physical sequences first: on a tie Tk prefers them over virtual events.
		for sequence in self._signals:
			if is_virtual(sequence):
				continue
			pattern = parse_sequence(sequence)
			if pattern is not None:
				candidates.append((pattern, sequence))

		for sequence in self._signals:
			if not is_virtual(sequence):
				continue
			for physical in self._virtual_definitions(sequence):
				pattern = parse_sequence(physical)
				if pattern is not None:
					candidates.append((pattern, sequence))

		self._candidates = candidates

	def close(self) -> None:
		"""
		Destroy the hidden widget. Safe to call more than once.
		"""
		if self._toplevel is not None:
			self._toplevel.destroy()
			self._toplevel = None
		self._signals.clear()
		self._candidates = []

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _register(self, mapping: dict[str, SignalSpec], *, require_class_binding: bool) -> None:
		for sequence, spec in mapping.items():
			if require_class_binding and not self._class_binds(sequence):
				continue
			self._signals[sequence] = spec
			self._widget.bind(sequence, self._make_callback(sequence))

	def _make_callback(self, sequence: str) -> Callable[[Any], str]:
		def callback(event: Any = None) -> str:
			self._emit(sequence)
			return "break"

		return callback

	def _emit(self, sequence: str) -> None:
		# Real key events reaching the hidden widget outside resolve() are dropped.
		if self._active is None:
			return
		signal, args = self._signals[sequence]
		self._active.emit(signal, *args)

	def _class_binds(self, sequence: str) -> bool:
		try:
			return bool(self._widget.bind_class("Text", sequence))
		except tk.TclError:
			return False

	def _virtual_definitions(self, virtual: str) -> tuple[str, ...]:
		try:
			return tuple(self._widget.event_info(virtual))
		except tk.TclError:
			return ()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} sequences={len(self._signals)}>"
