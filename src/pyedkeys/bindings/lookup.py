# ---------------------------------------------------------------------------
# File: lookup.py
# ---------------------------------------------------------------------------
# Description:
#	Key encoding + ordered table lookup for pyedkeys.
#
# Notes:
#	This module is pure mapping and is UI-toolkit-agnostic.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/09/2026	Paul G. LeDuc				Add KeyTable wrapper (resolve_keyval)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from pyedkeys.bindings.keysyms import SIGNIFICANT_MODIFIERS
from pyedkeys.bindings.tables import (
	CUSTOM_KEY_BINDINGS,
	PREDEFINED_KEY_BINDINGS,
	CommandTableEntry,
)


def encode_key(keyval: int, state: int) -> Optional[int]:
	"""
	Pack (keyval, state) into a single lookup key.

	Only Shift, Control and Mod1 survive the mask. Returns None when there is
	no key payload (keyval 0), meaning no lookup is possible.
	"""
	if not keyval:
		return None
	return ((state & SIGNIFICANT_MODIFIERS) << 16) | keyval


def resolve_in_table(
	table: Sequence[CommandTableEntry],
	keyval: int,
	state: int,
) -> tuple[str, ...]:
	"""
	Return the commands of the first entry matching (keyval, state), or ().
	"""
	lookup = encode_key(keyval, state)
	if lookup is None:
		return ()

	for item in table:
		if item.combo.encoded == lookup:
			return item.commands

	return ()


@dataclass(frozen=True)
class KeyTable:
	"""
	KeyTable

	An ordered, read-only command table. The first matching entry wins.
	"""
	name: str
	_entries: tuple[CommandTableEntry, ...]

	def resolve_keyval(self, keyval: int, state: int) -> tuple[str, ...]:
		return resolve_in_table(self._entries, keyval, state)

	def entries(self) -> tuple[CommandTableEntry, ...]:
		return self._entries

	def extended(self, extra: Iterable[CommandTableEntry], *, name: str | None = None) -> "KeyTable":
		"""
		Return a new table with `extra` appended after the existing entries.

		Appended entries lose to existing ones for the same key combination.
		"""
		return KeyTable(name or self.name, self._entries + tuple(extra))

	def __len__(self) -> int:
		return len(self._entries)


CUSTOM_TABLE = KeyTable("custom", CUSTOM_KEY_BINDINGS)
PREDEFINED_TABLE = KeyTable("predefined", PREDEFINED_KEY_BINDINGS)
