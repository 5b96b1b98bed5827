# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Configuration wrapper for pyedkeys.
#
# Notes:
#	- TranslatorConfig is a thin read-only view over an options dict.
#	- Every consumer reads through cfg.get(key, default) so plain dicts work too.
#
#	Keys:
#	- "native.enabled"          bool   (default: True)
#	- "native.backend"          "tk" | "null" (default: "tk")
#	- "native.emacs_bindings"   bool   (default: False)
#	- "telemetry_enabled"       bool   (default: False)
#	- "telemetry_sink"          "null" | "log" (default: "null")
#	- logging keys, see core/logging.py
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Add typed accessors for native.* keys
# 01/14/2026	Paul G. LeDuc				Parse string flags ("false", "0", "off")
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


NATIVE_BACKENDS: tuple[str, ...] = ("tk", "null")

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off", ""})


def coerce_bool(value: Any, default: bool) -> bool:
	"""
	Read a config flag. Strings are parsed ("false", "0", "off" are False);
	unrecognized strings and None fall back to `default`.
	"""
	if value is None:
		return default

	if isinstance(value, str):
		val = value.strip().lower()
		if val in _TRUE_WORDS:
			return True
		if val in _FALSE_WORDS:
			return False
		return default

	return bool(value)


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
	"""
	Light wrapper for translator options.
	"""
	options: Mapping[str, Any] | None = None

	@classmethod
	def coerce(cls, cfg: "TranslatorConfig | Mapping[str, Any] | None") -> "TranslatorConfig":
		if isinstance(cfg, TranslatorConfig):
			return cfg
		return cls(dict(cfg) if cfg is not None else None)

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)

	@property
	def native_enabled(self) -> bool:
		return coerce_bool(self.get("native.enabled"), True)

	@property
	def native_backend(self) -> str:
		backend = str(self.get("native.backend", "tk")).strip().lower()
		if backend not in NATIVE_BACKENDS:
			raise ValueError(
				f"Unknown native.backend {backend!r}; expected one of {NATIVE_BACKENDS}"
			)
		return backend

	@property
	def emacs_bindings(self) -> bool:
		return coerce_bool(self.get("native.emacs_bindings"), False)
