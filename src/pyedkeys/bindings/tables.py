# ---------------------------------------------------------------------------
# File: tables.py
# ---------------------------------------------------------------------------
# Description:
#	Static command tables for pyedkeys.
#
# Notes:
#	- This module only declares bindings (policy); lookup lives in lookup.py.
#	- All tables are tuples built at import time and never mutated.
#	- Entry order matters: the first entry for a key combination wins.
#	- MovementStep / DeleteType follow the host toolkit's movement and
#	  deletion units, in the order the directional tables are indexed.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/09/2026	Paul G. LeDuc				Add directional move/delete tables
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from pyedkeys.bindings import keysyms as k
from pyedkeys.bindings.keysyms import CONTROL_MASK, SHIFT_MASK, SIGNIFICANT_MODIFIERS


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KeyCombination:
	"""
	KeyCombination

	A (keyval, modifier state) pair used only as a lookup key.
	"""
	keyval: int
	state: int = 0

	@property
	def encoded(self) -> int:
		return ((self.state & SIGNIFICANT_MODIFIERS) << 16) | self.keyval


@dataclass(frozen=True, slots=True)
class CommandTableEntry:
	"""
	CommandTableEntry

	- combo:	Key combination that triggers the entry.
	- commands:	Command names emitted together, in order (1+).
	"""
	combo: KeyCombination
	commands: tuple[str, ...]

	def __post_init__(self) -> None:
		if not self.commands:
			raise ValueError("CommandTableEntry needs at least one command name")


def entry(keyval: int, state: int, *commands: str) -> CommandTableEntry:
	return CommandTableEntry(KeyCombination(keyval, state), tuple(commands))


# ---------------------------------------------------------------------------
# Application shortcuts
# ---------------------------------------------------------------------------

CUSTOM_KEY_BINDINGS: tuple[CommandTableEntry, ...] = (
	entry(k.KEY_b,         CONTROL_MASK,              "ToggleBold"),
	entry(k.KEY_i,         CONTROL_MASK,              "ToggleItalic"),
	entry(k.KEY_Escape,    0,                         "Cancel"),
	entry(k.KEY_greater,   CONTROL_MASK,              "Cancel"),
	entry(k.KEY_Tab,       0,                         "InsertTab"),
	entry(k.KEY_Tab,       SHIFT_MASK,                "InsertBacktab"),
	entry(k.KEY_Return,    0,                         "InsertNewLine"),
	entry(k.KEY_KP_Enter,  0,                         "InsertNewLine"),
	entry(k.KEY_ISO_Enter, 0,                         "InsertNewLine"),
	entry(k.KEY_Return,    SHIFT_MASK,                "InsertLineBreak"),
	entry(k.KEY_KP_Enter,  SHIFT_MASK,                "InsertLineBreak"),
	entry(k.KEY_ISO_Enter, SHIFT_MASK,                "InsertLineBreak"),
	entry(k.KEY_V,         CONTROL_MASK | SHIFT_MASK, "PasteAsPlainText"),
)


# ---------------------------------------------------------------------------
# Standard navigation / editing bindings
# ---------------------------------------------------------------------------

_CS = CONTROL_MASK | SHIFT_MASK

PREDEFINED_KEY_BINDINGS: tuple[CommandTableEntry, ...] = (
	entry(k.KEY_Left,         0,            "MoveLeft"),
	entry(k.KEY_KP_Left,      0,            "MoveLeft"),
	entry(k.KEY_Left,         SHIFT_MASK,   "MoveBackwardAndModifySelection"),
	entry(k.KEY_KP_Left,      SHIFT_MASK,   "MoveBackwardAndModifySelection"),
	entry(k.KEY_Left,         CONTROL_MASK, "MoveWordBackward"),
	entry(k.KEY_KP_Left,      CONTROL_MASK, "MoveWordBackward"),
	entry(k.KEY_Left,         _CS,          "MoveWordBackwardAndModifySelection"),
	# Truncated name carried over as-is; see DESIGN.md open questions.
	entry(k.KEY_KP_Left,      _CS,          "MoveWordBackwardAndModifySelectio"),
	entry(k.KEY_Right,        0,            "MoveRight"),
	entry(k.KEY_KP_Right,     0,            "MoveRight"),
	entry(k.KEY_Right,        SHIFT_MASK,   "MoveForwardAndModifySelection"),
	entry(k.KEY_KP_Right,     SHIFT_MASK,   "MoveForwardAndModifySelection"),
	entry(k.KEY_Right,        CONTROL_MASK, "MoveWordForward"),
	entry(k.KEY_KP_Right,     CONTROL_MASK, "MoveWordForward"),
	entry(k.KEY_Right,        _CS,          "MoveWordForwardAndModifySelection"),
	entry(k.KEY_KP_Right,     _CS,          "MoveWordForwardAndModifySelection"),
	entry(k.KEY_Up,           0,            "MoveUp"),
	entry(k.KEY_KP_Up,        0,            "MoveUp"),
	entry(k.KEY_Up,           SHIFT_MASK,   "MoveUpAndModifySelection"),
	entry(k.KEY_KP_Up,        SHIFT_MASK,   "MoveUpAndModifySelection"),
	entry(k.KEY_Down,         0,            "MoveDown"),
	entry(k.KEY_KP_Down,      0,            "MoveDown"),
	entry(k.KEY_Down,         SHIFT_MASK,   "MoveDownAndModifySelection"),
	entry(k.KEY_KP_Down,      SHIFT_MASK,   "MoveDownAndModifySelection"),
	entry(k.KEY_Home,         0,            "MoveToBeginningOfLine"),
	entry(k.KEY_KP_Home,      0,            "MoveToBeginningOfLine"),
	entry(k.KEY_Home,         SHIFT_MASK,   "MoveToBeginningOfLineAndModifySelection"),
	entry(k.KEY_KP_Home,      SHIFT_MASK,   "MoveToBeginningOfLineAndModifySelection"),
	entry(k.KEY_Home,         CONTROL_MASK, "MoveToBeginningOfDocument"),
	entry(k.KEY_KP_Home,      CONTROL_MASK, "MoveToBeginningOfDocument"),
	entry(k.KEY_Home,         _CS,          "MoveToBeginningOfDocumentAndModifySelection"),
	entry(k.KEY_KP_Home,      _CS,          "MoveToBeginningOfDocumentAndModifySelection"),
	entry(k.KEY_End,          0,            "MoveToEndOfLine"),
	entry(k.KEY_KP_End,       0,            "MoveToEndOfLine"),
	entry(k.KEY_End,          SHIFT_MASK,   "MoveToEndOfLineAndModifySelection"),
	entry(k.KEY_KP_End,       SHIFT_MASK,   "MoveToEndOfLineAndModifySelection"),
	entry(k.KEY_End,          CONTROL_MASK, "MoveToEndOfDocument"),
	entry(k.KEY_KP_End,       CONTROL_MASK, "MoveToEndOfDocument"),
	entry(k.KEY_End,          _CS,          "MoveToEndOfDocumentAndModifySelection"),
	entry(k.KEY_KP_End,       _CS,          "MoveToEndOfDocumentAndModifySelection"),
	entry(k.KEY_Page_Up,      0,            "MovePageUp"),
	entry(k.KEY_KP_Page_Up,   0,            "MovePageUp"),
	entry(k.KEY_Page_Up,      SHIFT_MASK,   "MovePageUpAndModifySelection"),
	entry(k.KEY_KP_Page_Up,   SHIFT_MASK,   "MovePageUpAndModifySelection"),
	entry(k.KEY_Page_Down,    0,            "MovePageDown"),
	entry(k.KEY_KP_Page_Down, 0,            "MovePageDown"),
	entry(k.KEY_Page_Down,    SHIFT_MASK,   "MovePageDownAndModifySelection"),
	entry(k.KEY_KP_Page_Down, SHIFT_MASK,   "MovePageDownAndModifySelection"),
	entry(k.KEY_Delete,       0,            "DeleteForward"),
	entry(k.KEY_KP_Delete,    0,            "DeleteForward"),
	entry(k.KEY_Delete,       CONTROL_MASK, "DeleteWordForward"),
	entry(k.KEY_KP_Delete,    CONTROL_MASK, "DeleteWordForward"),
	entry(k.KEY_BackSpace,    0,            "DeleteBackward"),
	entry(k.KEY_BackSpace,    SHIFT_MASK,   "DeleteBackward"),
	entry(k.KEY_BackSpace,    CONTROL_MASK, "DeleteWordBackward"),
	entry(k.KEY_a,            CONTROL_MASK, "SelectAll"),
	entry(k.KEY_a,            _CS,          "Unselect"),
	entry(k.KEY_slash,        CONTROL_MASK, "SelectAll"),
	entry(k.KEY_backslash,    CONTROL_MASK, "Unselect"),
	entry(k.KEY_x,            CONTROL_MASK, "Cut"),
	entry(k.KEY_c,            CONTROL_MASK, "Copy"),
	entry(k.KEY_v,            CONTROL_MASK, "Paste"),
	entry(k.KEY_KP_Delete,    SHIFT_MASK,   "Cut"),
	entry(k.KEY_KP_Insert,    CONTROL_MASK, "Copy"),
	entry(k.KEY_KP_Insert,    SHIFT_MASK,   "Paste"),
)


# ---------------------------------------------------------------------------
# Directional tables
# ---------------------------------------------------------------------------

class MovementStep(IntEnum):
	LOGICAL_POSITIONS = 0
	VISUAL_POSITIONS = 1
	WORDS = 2
	DISPLAY_LINES = 3
	DISPLAY_LINE_ENDS = 4
	PARAGRAPHS = 5
	PARAGRAPH_ENDS = 6
	PAGES = 7
	BUFFER_ENDS = 8
	HORIZONTAL_PAGES = 9


class DeleteType(IntEnum):
	CHARS = 0
	WORD_ENDS = 1
	WORDS = 2
	DISPLAY_LINES = 3
	DISPLAY_LINE_ENDS = 4
	PARAGRAPH_ENDS = 5
	PARAGRAPHS = 6
	WHITESPACE = 7


# Columns: backward, forward, backward + extend selection, forward + extend selection.
MOVE_COMMANDS: tuple[tuple[Optional[str], ...], ...] = (
	# MovementStep.LOGICAL_POSITIONS
	("MoveBackward", "MoveForward",
	 "MoveBackwardAndModifySelection", "MoveForwardAndModifySelection"),
	# MovementStep.VISUAL_POSITIONS
	("MoveLeft", "MoveRight",
	 "MoveBackwardAndModifySelection", "MoveForwardAndModifySelection"),
	# MovementStep.WORDS
	("MoveWordBackward", "MoveWordForward",
	 "MoveWordBackwardAndModifySelection", "MoveWordForwardAndModifySelection"),
	# MovementStep.DISPLAY_LINES
	("MoveUp", "MoveDown",
	 "MoveUpAndModifySelection", "MoveDownAndModifySelection"),
	# MovementStep.DISPLAY_LINE_ENDS
	("MoveToBeginningOfLine", "MoveToEndOfLine",
	 "MoveToBeginningOfLineAndModifySelection", "MoveToEndOfLineAndModifySelection"),
	# MovementStep.PARAGRAPHS
	(None, None,
	 "MoveParagraphBackwardAndModifySelection", "MoveParagraphForwardAndModifySelection"),
	# MovementStep.PARAGRAPH_ENDS
	("MoveToBeginningOfParagraph", "MoveToEndOfParagraph",
	 "MoveToBeginningOfParagraphAndModifySelection", "MoveToEndOfParagraphAndModifySelection"),
	# MovementStep.PAGES
	("MovePageUp", "MovePageDown",
	 "MovePageUpAndModifySelection", "MovePageDownAndModifySelection"),
	# MovementStep.BUFFER_ENDS
	("MoveToBeginningOfDocument", "MoveToEndOfDocument",
	 "MoveToBeginningOfDocumentAndModifySelection", "MoveToEndOfDocumentAndModifySelection"),
	# MovementStep.HORIZONTAL_PAGES
	(None, None, None, None),
)

# Columns: backward, forward.
DELETE_COMMANDS: tuple[tuple[Optional[str], ...], ...] = (
	("DeleteBackward", "DeleteForward"),                              # CHARS
	("DeleteWordBackward", "DeleteWordForward"),                      # WORD_ENDS
	("DeleteWordBackward", "DeleteWordForward"),                      # WORDS
	("DeleteToBeginningOfLine", "DeleteToEndOfLine"),                 # DISPLAY_LINES
	("DeleteToBeginningOfLine", "DeleteToEndOfLine"),                 # DISPLAY_LINE_ENDS
	("DeleteToBeginningOfParagraph", "DeleteToEndOfParagraph"),       # PARAGRAPH_ENDS
	("DeleteToBeginningOfParagraph", "DeleteToEndOfParagraph"),       # PARAGRAPHS
	(None, None),                                                     # WHITESPACE
)


def move_command(step: int, column: int) -> Optional[str]:
	"""
	Look up a move command; None for an out-of-range step or an empty cell.
	"""
	if not 0 <= step < len(MOVE_COMMANDS):
		return None
	return MOVE_COMMANDS[step][column]


def delete_command(delete_type: int, column: int) -> Optional[str]:
	"""
	Look up a delete command; None for an out-of-range type or an empty cell.
	"""
	if not 0 <= delete_type < len(DELETE_COMMANDS):
		return None
	return DELETE_COMMANDS[delete_type][column]
