# ---------------------------------------------------------------------------
# File: signals.py
# ---------------------------------------------------------------------------
# Description:
#	Editing-signal handlers for pyedkeys.
#
# Notes:
#	- A text widget reports key bindings as editing signals ("move-cursor",
#	  "delete-from-cursor", "cut-clipboard", ...). EditingSignals turns each
#	  signal into command names.
#	- One EditingSignals is created per resolution call and owns that call's
#	  pending commands; nothing is shared across calls.
#	- Handlers never touch the widget; suppressing the widget's own handling
#	  is the backend's job (Tk: return "break").
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Add popup-menu / show-help / insert-emoji
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable

from pyedkeys.bindings.tables import DeleteType, delete_command, move_command


_WORD_ANCHOR_BACKWARD = ("MoveWordForward", "MoveWordBackward")
_WORD_ANCHOR_FORWARD = ("MoveWordBackward", "MoveWordForward")

# (backward, forward) boundary move emitted once before a line/paragraph delete.
_BOUNDARY_MOVES: dict[int, tuple[str, str]] = {
	DeleteType.DISPLAY_LINES: ("MoveToBeginningOfLine", "MoveToEndOfLine"),
	DeleteType.PARAGRAPHS: ("MoveToBeginningOfParagraph", "MoveToEndOfParagraph"),
}


class EditingSignals:
	"""
	EditingSignals

	Call-scoped accumulator. Each handler appends zero or more command names
	to `commands`, in emission order.
	"""

	SIGNAL_NAMES: tuple[str, ...] = (
		"backspace",
		"select-all",
		"cut-clipboard",
		"copy-clipboard",
		"paste-clipboard",
		"toggle-overwrite",
		"move-cursor",
		"delete-from-cursor",
		"insert-emoji",
		"popup-menu",
		"show-help",
	)

	def __init__(self) -> None:
		self.commands: list[str] = []

	# -----------------------------------------------------------------------
	# Dispatch by signal name
	# -----------------------------------------------------------------------

	def emit(self, signal: str, *args: Any) -> None:
		"""
		Run the handler for a toolkit signal name, e.g. emit("move-cursor", 2, -1, False).

		Raises KeyError for a signal this class does not handle.
		"""
		if signal not in self.SIGNAL_NAMES:
			raise KeyError(f"Unknown editing signal: {signal!r}")
		handler: Callable[..., None] = getattr(self, signal.replace("-", "_"))
		handler(*args)

	def drain(self) -> list[str]:
		commands, self.commands = self.commands, []
		return commands

	# -----------------------------------------------------------------------
	# Simple signals
	# -----------------------------------------------------------------------

	def backspace(self) -> None:
		self.commands.append("DeleteBackward")

	def select_all(self, select: bool = True) -> None:
		self.commands.append("SelectAll" if select else "Unselect")

	def cut_clipboard(self) -> None:
		self.commands.append("Cut")

	def copy_clipboard(self) -> None:
		self.commands.append("Copy")

	def paste_clipboard(self) -> None:
		self.commands.append("Paste")

	def toggle_overwrite(self) -> None:
		self.commands.append("OverWrite")

	def insert_emoji(self) -> None:
		self.commands.append("GtkInsertEmoji")

	# Swallowed: the widget must not act, but there is no editing command.
	def popup_menu(self) -> None:
		return

	def show_help(self) -> None:
		return

	# -----------------------------------------------------------------------
	# Unit-based signals
	# -----------------------------------------------------------------------

	def move_cursor(self, step: int, count: int, extend_selection: bool = False) -> None:
		"""
		Append the move command for (step, direction, extend) abs(count) times.

		Unknown steps and empty table cells emit nothing.
		"""
		column = (2 if extend_selection else 0) + (1 if count > 0 else 0)
		command = move_command(int(step), column)
		if command is None:
			return

		self.commands.extend([command] * abs(count))

	def delete_from_cursor(self, delete_type: int, count: int) -> None:
		"""
		Append the anchor moves for `delete_type`, then the delete command
		abs(count) times.

		Word deletes first bracket the cursor with a word move pair so the
		delete starts on a word boundary. Line and paragraph deletes first move
		once to the boundary in the delete direction.
		"""
		forward = count > 0

		if delete_type == DeleteType.WORDS:
			self.commands.extend(_WORD_ANCHOR_FORWARD if forward else _WORD_ANCHOR_BACKWARD)
		elif delete_type in _BOUNDARY_MOVES:
			backward_move, forward_move = _BOUNDARY_MOVES[delete_type]
			self.commands.append(forward_move if forward else backward_move)

		command = delete_command(int(delete_type), 1 if forward else 0)
		if command is None:
			return

		self.commands.extend([command] * abs(count))
