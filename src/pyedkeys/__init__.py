# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public package surface for pyedkeys.
#
# Notes:
#   - Uses lazy exports so importing pyedkeys does not pull in tkinter.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"KeyBindingTranslator",
	"KeyPress",
	"KeyTable",
	"NullResolver",
	"ReentrantResolutionError",
	"TkTextResolver",
	"TranslatorConfig",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"KeyBindingTranslator": ("pyedkeys.translator", "KeyBindingTranslator"),
	"KeyPress": ("pyedkeys.native.base", "KeyPress"),
	"KeyTable": ("pyedkeys.bindings.lookup", "KeyTable"),
	"NullResolver": ("pyedkeys.native.base", "NullResolver"),
	"ReentrantResolutionError": ("pyedkeys.errors", "ReentrantResolutionError"),
	"TkTextResolver": ("pyedkeys.native.tk_text", "TkTextResolver"),
	"TranslatorConfig": ("pyedkeys.core.config", "TranslatorConfig"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyedkeys.bindings.lookup import KeyTable
	from pyedkeys.core.config import TranslatorConfig
	from pyedkeys.errors import ReentrantResolutionError
	from pyedkeys.native.base import KeyPress, NullResolver
	from pyedkeys.native.tk_text import TkTextResolver
	from pyedkeys.translator import KeyBindingTranslator
