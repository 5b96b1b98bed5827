# ---------------------------------------------------------------------------
# File: base.py
# ---------------------------------------------------------------------------
# Description:
#	Native resolver interface for pyedkeys.
#
# Notes:
#	- The translator depends only on NativeResolver, so the toolkit-backed
#	  resolver can be swapped for NullResolver (headless, tests).
#	- KeyPress is the toolkit-neutral view of a key event. Its `state` uses
#	  the X11 modifier layout the tables are written against; `tk_state`
#	  keeps Tk's own bits for matching Tk binding sequences.
#
#	Tk modifier bits by windowing system:
#	- x11:		Shift 0x1, Lock 0x2, Control 0x4, Alt/Meta Mod1 0x8.
#	- win32:	NumLock is reported as Mod1 (0x8), ScrollLock as Mod3 (0x20)
#				and Alt as 0x20000.
#	- aqua:		Command is Mod1 (0x8), Option is Mod2 (0x10).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				KeyPress.from_tk_event tolerates string state
# 01/14/2026	Paul G. LeDuc				Map win32/aqua Tk state onto the X11 layout
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from pyedkeys.bindings.keysyms import MOD1_MASK, MOD2_MASK, MOD3_MASK


WINDOWING_SYSTEMS: tuple[str, ...] = ("x11", "win32", "aqua")

TK_WIN32_NUMLOCK = MOD1_MASK
TK_WIN32_SCROLLLOCK = MOD3_MASK
TK_WIN32_ALT = 0x20000
TK_AQUA_COMMAND = MOD1_MASK
TK_AQUA_OPTION = MOD2_MASK

# Used when the event carries no live widget to ask.
_PLATFORM_WINDOWING = {
	"win32": "win32",
	"cygwin": "win32",
	"darwin": "aqua",
}


def windowing_system_of(event: Any) -> str:
	"""
	Ask the event's widget for Tk's windowing system ("x11", "win32", "aqua").

	tkinter hands out the widget path string instead of a widget when it
	cannot map it back; then the answer comes from sys.platform.
	"""
	widget = getattr(event, "widget", None)
	interp = getattr(widget, "tk", None)
	if interp is not None:
		return str(interp.call("tk", "windowingsystem"))
	return _PLATFORM_WINDOWING.get(sys.platform, "x11")


def tk_state_to_mask(state: int, windowing_system: str) -> int:
	"""
	Translate a Tk event state into the X11 layout.

	win32: NumLock and ScrollLock are dropped; Alt becomes Mod1.
	aqua: Option becomes Mod1 (the "alt" of the tables). Command has no
	place in that layout and is dropped.
	"""
	if windowing_system == "win32":
		alt = state & TK_WIN32_ALT
		state &= ~(TK_WIN32_NUMLOCK | TK_WIN32_SCROLLLOCK | TK_WIN32_ALT)
		return state | MOD1_MASK if alt else state

	if windowing_system == "aqua":
		option = state & TK_AQUA_OPTION
		state &= ~(TK_AQUA_COMMAND | TK_AQUA_OPTION)
		return state | MOD1_MASK if option else state

	return state


@dataclass(frozen=True, slots=True)
class KeyPress:
	"""
	KeyPress

	- keyval:	Raw key identifier (X keysym / Tk keysym_num).
	- state:	Modifier bitmask, X11 layout.
	- keysym:	Keysym name when the toolkit provides one (informational).
	- tk_state:	Tk's raw state when built from a Tk event; None otherwise.
	"""
	keyval: int
	state: int = 0
	keysym: str = ""
	tk_state: Optional[int] = None

	@property
	def native_state(self) -> int:
		"""
		State to match Tk binding sequences against.
		"""
		return self.state if self.tk_state is None else self.tk_state

	@classmethod
	def from_tk_event(cls, event: Any, windowing_system: Optional[str] = None) -> "KeyPress":
		"""
		Build a KeyPress from a tkinter event (or anything shaped like one).

		tkinter leaves `state` as a string for some event types; those carry
		no usable modifier bits here and are read as 0.

		Raises:
			ValueError: unknown windowing_system.
		"""
		if isinstance(event, KeyPress):
			return event

		if windowing_system is None:
			windowing_system = windowing_system_of(event)
		if windowing_system not in WINDOWING_SYSTEMS:
			raise ValueError(
				f"Unknown windowing system {windowing_system!r}; expected one of {WINDOWING_SYSTEMS}"
			)

		keyval = getattr(event, "keysym_num", 0)
		state = getattr(event, "state", 0)
		keysym = getattr(event, "keysym", "")

		raw = state if isinstance(state, int) else 0

		return cls(
			keyval=keyval if isinstance(keyval, int) else 0,
			state=tk_state_to_mask(raw, windowing_system),
			keysym=keysym if isinstance(keysym, str) else "",
			tk_state=raw,
		)


@runtime_checkable
class NativeResolver(Protocol):
	"""
	Minimal interface the translator needs from a toolkit-backed resolver.
	"""
	def resolve(self, event: KeyPress) -> list[str]:
		...


class NullResolver:
	"""
	Resolver that never produces commands; the static tables decide everything.
	"""

	def resolve(self, event: KeyPress) -> list[str]:
		return []

	def close(self) -> None:
		return

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__}>"
