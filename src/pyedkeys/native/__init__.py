# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Native (toolkit-backed) key-binding resolution for pyedkeys.
#
# Notes:
#	- TkTextResolver is imported lazily so headless users of NullResolver
#	  never import tkinter.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Add build_native_resolver()
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from pyedkeys.core.config import TranslatorConfig
from pyedkeys.core.logging import get_lib_logger
from .base import KeyPress, NativeResolver, NullResolver
from .signals import EditingSignals

__all__ = [
	"EditingSignals",
	"KeyPress",
	"NativeResolver",
	"NullResolver",
	"TkTextResolver",
	"build_native_resolver",
]


def build_native_resolver(
	cfg: TranslatorConfig | Mapping[str, Any] | None = None,
	master: Any = None,
) -> NativeResolver:
	"""
	Build the resolver selected by `cfg`.

	Falls back to NullResolver when native resolution is disabled, the backend
	is "null", or there is no Tk master to host the hidden widget.

	Raises:
		ValueError: unknown "native.backend".
	"""
	cfg = TranslatorConfig.coerce(cfg)
	log = get_lib_logger("native")

	backend = cfg.native_backend
	if not cfg.native_enabled or backend == "null":
		log.info("Native key resolution disabled (backend=%s)", backend)
		return NullResolver()

	if master is None:
		log.info("No Tk master supplied; native key resolution disabled")
		return NullResolver()

	from .tk_text import TkTextResolver

	return TkTextResolver(master, emacs_bindings=cfg.emacs_bindings)


def __getattr__(name: str) -> Any:
	if name == "TkTextResolver":
		from .tk_text import TkTextResolver
		return TkTextResolver
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


if TYPE_CHECKING:
	from .tk_text import TkTextResolver
