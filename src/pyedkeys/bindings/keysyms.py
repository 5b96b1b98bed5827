# ---------------------------------------------------------------------------
# File: keysyms.py
# ---------------------------------------------------------------------------
# Description:
#	Keyval and modifier-mask constants for pyedkeys.
#
# Notes:
#	- Values are X11 keysyms, which is what GDK keyvals are and what Tk reports
#	  in event.keysym_num.
#	- Modifier bits are the X11 state bits (same as GDK and Tk on X11).
#	- KEYSYM_VALUES covers the names that appear in Tk's text bindings; single
#	  Latin-1 characters are resolved through ord().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/11/2026	Paul G. LeDuc				Add keypad + function key names
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional


# ---------------------------------------------------------------------------
# Modifier masks
# ---------------------------------------------------------------------------

SHIFT_MASK = 1 << 0
LOCK_MASK = 1 << 1
CONTROL_MASK = 1 << 2
MOD1_MASK = 1 << 3
MOD2_MASK = 1 << 4
MOD3_MASK = 1 << 5
MOD4_MASK = 1 << 6
MOD5_MASK = 1 << 7

# Only these take part in table lookups; Lock, NumLock (Mod2) etc. are ignored.
SIGNIFICANT_MODIFIERS = SHIFT_MASK | CONTROL_MASK | MOD1_MASK

# Every bit a Tk key pattern can name.
ALL_KEY_MODIFIERS = (
	SHIFT_MASK | LOCK_MASK | CONTROL_MASK
	| MOD1_MASK | MOD2_MASK | MOD3_MASK | MOD4_MASK | MOD5_MASK
)


# ---------------------------------------------------------------------------
# Keyvals
# ---------------------------------------------------------------------------

KEY_space = 0x020
KEY_period = 0x02E
KEY_slash = 0x02F
KEY_semicolon = 0x03B
KEY_less = 0x03C
KEY_greater = 0x03E
KEY_V = 0x056
KEY_backslash = 0x05C
KEY_a = 0x061
KEY_b = 0x062
KEY_c = 0x063
KEY_i = 0x069
KEY_v = 0x076
KEY_x = 0x078

KEY_ISO_Left_Tab = 0xFE20
KEY_ISO_Enter = 0xFE34

KEY_BackSpace = 0xFF08
KEY_Tab = 0xFF09
KEY_Return = 0xFF0D
KEY_Escape = 0xFF1B
KEY_Home = 0xFF50
KEY_Left = 0xFF51
KEY_Up = 0xFF52
KEY_Right = 0xFF53
KEY_Down = 0xFF54
KEY_Page_Up = 0xFF55
KEY_Page_Down = 0xFF56
KEY_End = 0xFF57
KEY_Insert = 0xFF63
KEY_Menu = 0xFF67

KEY_KP_Enter = 0xFF8D
KEY_KP_Home = 0xFF95
KEY_KP_Left = 0xFF96
KEY_KP_Up = 0xFF97
KEY_KP_Right = 0xFF98
KEY_KP_Down = 0xFF99
KEY_KP_Page_Up = 0xFF9A
KEY_KP_Page_Down = 0xFF9B
KEY_KP_End = 0xFF9C
KEY_KP_Insert = 0xFF9E
KEY_KP_Delete = 0xFF9F

KEY_F1 = 0xFFBE
KEY_Delete = 0xFFFF


KEYSYM_VALUES: dict[str, int] = {
	"space": KEY_space,
	"period": KEY_period,
	"slash": KEY_slash,
	"semicolon": KEY_semicolon,
	"less": KEY_less,
	"greater": KEY_greater,
	"backslash": KEY_backslash,
	"ISO_Left_Tab": KEY_ISO_Left_Tab,
	"ISO_Enter": KEY_ISO_Enter,
	"BackSpace": KEY_BackSpace,
	"Tab": KEY_Tab,
	"Return": KEY_Return,
	"Escape": KEY_Escape,
	"Home": KEY_Home,
	"Left": KEY_Left,
	"Up": KEY_Up,
	"Right": KEY_Right,
	"Down": KEY_Down,
	"Prior": KEY_Page_Up,
	"Page_Up": KEY_Page_Up,
	"Next": KEY_Page_Down,
	"Page_Down": KEY_Page_Down,
	"End": KEY_End,
	"Insert": KEY_Insert,
	"Menu": KEY_Menu,
	"KP_Enter": KEY_KP_Enter,
	"KP_Home": KEY_KP_Home,
	"KP_Left": KEY_KP_Left,
	"KP_Up": KEY_KP_Up,
	"KP_Right": KEY_KP_Right,
	"KP_Down": KEY_KP_Down,
	"KP_Prior": KEY_KP_Page_Up,
	"KP_Page_Up": KEY_KP_Page_Up,
	"KP_Next": KEY_KP_Page_Down,
	"KP_Page_Down": KEY_KP_Page_Down,
	"KP_End": KEY_KP_End,
	"KP_Insert": KEY_KP_Insert,
	"KP_Delete": KEY_KP_Delete,
	"Delete": KEY_Delete,
}

# F1..F35 are contiguous.
KEYSYM_VALUES.update({f"F{n}": KEY_F1 + n - 1 for n in range(1, 36)})


def keysym_value(name: str) -> Optional[int]:
	"""
	Resolve a keysym name ("Left", "Prior", "slash", "V") to its keyval.

	Returns None for names this module does not know.
	"""
	if not name:
		return None

	value = KEYSYM_VALUES.get(name)
	if value is not None:
		return value

	if len(name) == 1 and ord(name) < 0x100:
		return ord(name)

	return None
