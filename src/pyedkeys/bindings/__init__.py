# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Static key bindings for pyedkeys (keysyms, command tables, lookup).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .lookup import CUSTOM_TABLE, PREDEFINED_TABLE, KeyTable, encode_key, resolve_in_table
from .tables import (
	CommandTableEntry,
	DeleteType,
	KeyCombination,
	MovementStep,
)

__all__ = [
	"CUSTOM_TABLE",
	"PREDEFINED_TABLE",
	"CommandTableEntry",
	"DeleteType",
	"KeyCombination",
	"KeyTable",
	"MovementStep",
	"encode_key",
	"resolve_in_table",
]
