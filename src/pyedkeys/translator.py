# ---------------------------------------------------------------------------
# File: translator.py
# ---------------------------------------------------------------------------
# Description:
#	KeyBindingTranslator for pyedkeys (key event -> editing command names).
#
# Notes:
#	- Uses layered resolution for key events:
#		1) Native resolver (hidden toolkit text widget)
#		2) Custom table (application shortcuts)
#		3) Predefined table (standard navigation / editing)
#	- Bare keyval lookups skip the native resolver:
#		1) Predefined table
#		2) Custom table
#	- An unhandled key returns []; that is not an error.
#	- One resolution may be in flight per translator. A reentrant call raises
#	  ReentrantResolutionError.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Use Protocol for NativeResolver (injectable)
# 01/11/2026	Paul G. LeDuc				Add telemetry (keys.translated / key.unhandled)
# 01/14/2026	Paul G. LeDuc				Time event resolution (keys.resolve_us)
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pyedkeys.bindings.lookup import CUSTOM_TABLE, PREDEFINED_TABLE, KeyTable
from pyedkeys.core.config import TranslatorConfig
from pyedkeys.core.logging import get_lib_logger
from pyedkeys.core.telemetry import Telemetry, get_telemetry
from pyedkeys.errors import ReentrantResolutionError
from pyedkeys.native import NativeResolver, build_native_resolver
from pyedkeys.native.base import KeyPress


class KeyBindingTranslator:
	"""
	KeyBindingTranslator

	Translates key presses into ordered editing command names.

	Args:
		native:		NativeResolver to consult first for key events. Built from
					`cfg` (and `master`) when omitted.
		cfg:		TranslatorConfig or plain dict.
		master:		Tk widget hosting the hidden text widget (native backend "tk").
		custom:		Application shortcut table.
		predefined:	Standard binding table.
		telemetry:	Telemetry facade; the global one when omitted.
	"""

	def __init__(
		self,
		native: Optional[NativeResolver] = None,
		*,
		cfg: TranslatorConfig | Mapping[str, Any] | None = None,
		master: Any = None,
		custom: KeyTable = CUSTOM_TABLE,
		predefined: KeyTable = PREDEFINED_TABLE,
		telemetry: Optional[Telemetry] = None,
		logger: Optional[logging.Logger] = None,
	) -> None:
		self.cfg = TranslatorConfig.coerce(cfg)
		self.native: NativeResolver = native if native is not None else build_native_resolver(self.cfg, master)
		self.custom = custom
		self.predefined = predefined

		self._telemetry = telemetry
		self._log = logger or get_lib_logger("translator")
		self._in_flight = False

	@property
	def telemetry(self) -> Telemetry:
		return self._telemetry if self._telemetry is not None else get_telemetry()

	# -----------------------------------------------------------------------
	# Entry points
	# -----------------------------------------------------------------------

	def commands_for_event(self, event: Any) -> list[str]:
		"""
		Translate a toolkit key event (tkinter event or KeyPress).

		Resolution order:
			1) Native resolver; if it produced anything, the tables are skipped
			2) Custom table
			3) Predefined table

		Raises:
			ReentrantResolutionError: another call is still in flight.
		"""
		key = KeyPress.from_tk_event(event)

		with self._resolution(), self.telemetry.timer("keys.resolve_us", {"path": "event"}):
			commands = self.native.resolve(key)
			if commands:
				return self._report("event", "native", key, commands)

			for table in (self.custom, self.predefined):
				commands = list(table.resolve_keyval(key.keyval, key.state))
				if commands:
					return self._report("event", table.name, key, commands)

			return self._report("event", "none", key, [])

	def commands_for_keyval(self, keyval: int, state: int) -> list[str]:
		"""
		Translate a bare (keyval, state) pair without the native resolver.

		Resolution order:
			1) Predefined table
			2) Custom table

		The shipped tables share no key combination, so the order only
		matters for tables extended by the application.
		"""
		key = KeyPress(keyval=keyval, state=state)

		with self._resolution():
			for table in (self.predefined, self.custom):
				commands = list(table.resolve_keyval(keyval, state))
				if commands:
					return self._report("keyval", table.name, key, commands)

			return self._report("keyval", "none", key, [])

	def close(self) -> None:
		"""
		Release the native resolver's widget, if it has one.
		"""
		close = getattr(self.native, "close", None)
		if callable(close):
			close()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _resolution(self) -> "_InFlight":
		if self._in_flight:
			raise ReentrantResolutionError(
				"KeyBindingTranslator called again before the previous resolution returned"
			)
		return _InFlight(self)

	def _report(self, path: str, source: str, key: KeyPress, commands: list[str]) -> list[str]:
		self.telemetry.counter("keys.translated", 1, {"path": path, "source": source})

		if commands:
			self._log.debug(
				"Key keyval=0x%x state=0x%x resolved by %s -> %s",
				key.keyval, key.state, source, commands,
			)
		else:
			self.telemetry.event(
				"key.unhandled",
				{"keyval": key.keyval, "state": key.state, "path": path},
			)
			self._log.debug("Key keyval=0x%x state=0x%x unhandled", key.keyval, key.state)

		return commands

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} native={self.native!r}>"


class _InFlight:
	"""
	Marks a translator busy for the duration of one resolution.
	"""

	def __init__(self, translator: KeyBindingTranslator) -> None:
		self._translator = translator

	def __enter__(self) -> "_InFlight":
		self._translator._in_flight = True
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self._translator._in_flight = False
