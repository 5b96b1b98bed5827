# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyedkeys (logging, telemetry, config).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Export TranslatorConfig
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import TranslatorConfig
from .logging import init_logging, get_logger, get_lib_logger
from .telemetry import init_telemetry, get_telemetry

__all__ = [
	"TranslatorConfig",
	"get_logger",
	"get_lib_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
]
