# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyedkeys (stdlib logging).
#
# Notes:
#	- Uses Python stdlib logging only.
#	- Library modules only ever call get_lib_logger(); init_logging() is for
#	  host applications and tests that want pyedkeys output configured.
#	- Idempotent initialization (won't duplicate handlers).
#
#	Supported cfg keys (dotted key first, flat alias second):
#	- "logging.level",      "log_level"      (default: "INFO")
#	- "logging.console",    "log_console"    (default: True)
#	- "logging.file",       "log_file"       (default: None)
#	- "logging.file_mode",  "log_file_mode"  (default: "a")
#	- "logging.reset_root", "log_reset_root" (default: False)
#	- "logging.format",     "log_format"     (default: standard format)
#	- "logging.datefmt",    "log_datefmt"    (default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/09/2026	Paul G. LeDuc				Configure the pyedkeys logger, not root
# 01/14/2026	Paul G. LeDuc				Parse string flags via coerce_bool
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os

from pyedkeys.core.config import coerce_bool


LIB_LOGGER_NAME = "pyedkeys"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


# (dotted key, flat alias, default)
_LOGGING_KEYS: dict[str, tuple[str, str, Any]] = {
	"level": ("logging.level", "log_level", "INFO"),
	"console": ("logging.console", "log_console", True),
	"file": ("logging.file", "log_file", None),
	"file_mode": ("logging.file_mode", "log_file_mode", "a"),
	"reset_root": ("logging.reset_root", "log_reset_root", False),
	"format": ("logging.format", "log_format", DEFAULT_FORMAT),
	"datefmt": ("logging.datefmt", "log_datefmt", DEFAULT_DATEFMT),
}


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None
_HANDLERS: list[logging.Handler] = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	"""
	Return a logger by explicit name.
	"""
	return logging.getLogger(name)


def get_lib_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a pyedkeys-scoped logger.

	Examples:
		get_lib_logger()              -> pyedkeys
		get_lib_logger("translator")  -> pyedkeys.translator
		get_lib_logger("native.tk")   -> pyedkeys.native.tk
	"""
	if component:
		return logging.getLogger(f"{LIB_LOGGER_NAME}.{component}")
	return logging.getLogger(LIB_LOGGER_NAME)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Attach handlers to the pyedkeys logger.

	Safe to call multiple times. Handlers are rebuilt only when the
	configuration signature changes.

	Args:
		cfg:
			Any object that supports cfg.get(key, default) (e.g., TranslatorConfig)
			or a dict-like.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	values = {name: _cfg_lookup(cfg, *keys) for name, keys in _LOGGING_KEYS.items()}

	level = _coerce_level(values["level"])
	file_mode = _coerce_file_mode(values["file_mode"])
	log_file = str(values["file"]) if values["file"] else None
	console = coerce_bool(values["console"], True)
	reset_root = coerce_bool(values["reset_root"], False)

	signature: tuple[Any, ...] = (
		level,
		console,
		log_file,
		file_mode,
		reset_root,
		str(values["format"]),
		str(values["datefmt"]),
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_configure_lib_logger(
		level=level,
		console_enabled=console,
		log_file=log_file,
		file_mode=file_mode,
		fmt=str(values["format"]),
		datefmt=str(values["datefmt"]),
		reset_root=reset_root,
	)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_lookup(cfg: Any | None, key: str, alias: str, default: Any) -> Any:
	value = _cfg_get(cfg, key, None)
	if value is None:
		value = _cfg_get(cfg, alias, default)
	return value


def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	"""
	Best-effort config getter.

	Supports:
	- cfg.get(key, default)
	- dict-like objects
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, default)

	try:
		return cfg[key]  # type: ignore[index]
	except (KeyError, IndexError, TypeError):
		return default


def _coerce_level(level: Any) -> int:
	"""
	Convert common representations of logging levels to an int.
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = getattr(logging, val, None)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	"""
	Only "a" or "w" are accepted for the FileHandler.
	"""
	if isinstance(mode, str):
		val = mode.strip().lower()
		if val in ("a", "w"):
			return val
	return "a"


def _configure_lib_logger(
	*,
	level: int,
	console_enabled: bool,
	log_file: str | None,
	file_mode: str,
	fmt: str,
	datefmt: str,
	reset_root: bool,
) -> None:
	"""
	Replace the handlers previously installed by init_logging().

	With reset_root=True the handlers go on the root logger (host apps that
	let pyedkeys own logging); otherwise they go on the pyedkeys logger only.
	"""
	for handler in _HANDLERS:
		for owner in (logging.getLogger(), logging.getLogger(LIB_LOGGER_NAME)):
			owner.removeHandler(handler)
		handler.close()
	_HANDLERS.clear()

	target = logging.getLogger() if reset_root else logging.getLogger(LIB_LOGGER_NAME)
	target.setLevel(level)
	if reset_root:
		for h in list(target.handlers):
			target.removeHandler(h)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		target.addHandler(ch)
		_HANDLERS.append(ch)

	if log_file:
		_ensure_parent_dir(log_file)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		target.addHandler(fh)
		_HANDLERS.append(fh)


def _ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(os.path.abspath(path))
	if parent:
		os.makedirs(parent, exist_ok=True)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Drop installed handlers and module-scoped init state (unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE
	for handler in _HANDLERS:
		for owner in (logging.getLogger(), logging.getLogger(LIB_LOGGER_NAME)):
			owner.removeHandler(handler)
		handler.close()
	_HANDLERS.clear()
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
