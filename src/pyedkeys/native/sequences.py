# ---------------------------------------------------------------------------
# File: sequences.py
# ---------------------------------------------------------------------------
# Description:
#	Tk binding-sequence parsing + matching for pyedkeys.
#
# Notes:
#	- Only single key-press patterns are understood ("<Control-Shift-Key-Left>",
#	  "<Prior>", "<Meta-b>"). Anything else parses to None and is skipped.
#	- Matching follows Tk: the keysym must be equal, the pattern's modifiers
#	  must all be held (extra held modifiers are allowed), and the pattern
#	  naming the most modifiers wins. Ties go to the earlier pattern.
#	- No Tk dependency; works on plain strings.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, TypeVar

from pyedkeys.bindings.keysyms import (
	ALL_KEY_MODIFIERS,
	CONTROL_MASK,
	LOCK_MASK,
	MOD1_MASK,
	MOD2_MASK,
	MOD3_MASK,
	MOD4_MASK,
	MOD5_MASK,
	SHIFT_MASK,
	keysym_value,
)


T = TypeVar("T")


MODIFIER_NAMES: dict[str, int] = {
	"Shift": SHIFT_MASK,
	"Lock": LOCK_MASK,
	"Control": CONTROL_MASK,
	"Ctrl": CONTROL_MASK,
	"Mod1": MOD1_MASK,
	"M1": MOD1_MASK,
	"Alt": MOD1_MASK,
	"Meta": MOD1_MASK,
	"M": MOD1_MASK,
	"Command": MOD1_MASK,
	"Mod2": MOD2_MASK,
	"M2": MOD2_MASK,
	"Option": MOD2_MASK,
	"Mod3": MOD3_MASK,
	"M3": MOD3_MASK,
	"Mod4": MOD4_MASK,
	"M4": MOD4_MASK,
	"Mod5": MOD5_MASK,
	"M5": MOD5_MASK,
}

_KEY_PRESS_TYPES = ("Key", "KeyPress")


@dataclass(frozen=True, slots=True)
class KeyPattern:
	keyval: int
	state: int = 0

	@property
	def specificity(self) -> int:
		return bin(self.state).count("1")

	def matches(self, keyval: int, state: int) -> bool:
		if keyval != self.keyval:
			return False
		return (self.state & ~(state & ALL_KEY_MODIFIERS)) == 0


def is_virtual(sequence: str) -> bool:
	return sequence.startswith("<<") and sequence.endswith(">>")


def parse_sequence(sequence: str) -> Optional[KeyPattern]:
	"""
	Parse a single Tk key-press pattern into a KeyPattern.

	Returns None for virtual events, mouse/other events, key releases,
	multi-event sequences and keysyms this package cannot resolve.
	"""
	seq = sequence.strip()
	if is_virtual(seq) or not (seq.startswith("<") and seq.endswith(">")):
		return None

	body = seq[1:-1]
	if not body or "<" in body or ">" in body:
		return None

	# "minus" is the keysym for "-", so splitting on "-" is safe.
	fields = body.split("-")
	keysym = fields[-1]
	state = 0

	# Tk reads a bare digit as a mouse button ("<1>" is <Button-1>).
	if keysym.isdigit() and not any(f in _KEY_PRESS_TYPES for f in fields[:-1]):
		return None

	for name in fields[:-1]:
		if name in _KEY_PRESS_TYPES:
			continue
		mask = MODIFIER_NAMES.get(name)
		if mask is None:
			# KeyRelease, Button, Double, ... are not key presses.
			return None
		state |= mask

	if keysym in _KEY_PRESS_TYPES:
		return None

	keyval = keysym_value(keysym)
	if keyval is None:
		return None

	return KeyPattern(keyval=keyval, state=state)


def best_match(
	candidates: Iterable[tuple[KeyPattern, T]],
	keyval: int,
	state: int,
) -> Optional[T]:
	"""
	Pick the payload of the most specific pattern matching (keyval, state).
	"""
	best: Optional[tuple[int, T]] = None

	for pattern, payload in candidates:
		if not pattern.matches(keyval, state):
			continue
		if best is None or pattern.specificity > best[0]:
			best = (pattern.specificity, payload)

	return best[1] if best is not None else None
