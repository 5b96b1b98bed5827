# ---------------------------------------------------------------------------
# File: telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Key translation telemetry for pyedkeys.
#
#	The translator reports:
#		- counter "keys.translated"  attrs: path, source
#		- timer   "keys.resolve_us"  attrs: path (event path only)
#		- event   "key.unhandled"    attrs: keyval, state, path
#
# Notes:
#	- Disabled telemetry is a no-op; callers never check `enabled` first.
#	- Sinks: "null" (default), "log" (DEBUG records on the pyedkeys logger),
#	  "memory" (kept in-process, for tests and key-usage dumps).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Accept TranslatorConfig in init_telemetry
# 01/14/2026	Paul G. LeDuc				Resolve timer, memory sink, hex key attrs
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, Protocol

from pyedkeys.core.config import coerce_bool
from pyedkeys.core.logging import get_lib_logger


TELEMETRY_SINKS: tuple[str, ...] = ("null", "log", "memory")

# Attrs rendered as hex by LogSink.
_HEX_ATTRS = frozenset({"keyval", "state"})


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: dict[str, Any] = field(default_factory=dict)


class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


def format_attrs(attrs: Mapping[str, Any]) -> str:
	"""
	Render attrs as sorted `k=v` pairs; keyval/state ints come out as hex.
	"""
	parts = []
	for key in sorted(attrs):
		value = attrs[key]
		if key in _HEX_ATTRS and isinstance(value, int):
			parts.append(f"{key}=0x{value:x}")
		else:
			parts.append(f"{key}={value}")
	return " ".join(parts)


class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes one record per event/metric. Runs on every key press, so DEBUG.
	"""

	def __init__(self, logger: logging.Logger, level: int = logging.DEBUG) -> None:
		self._log = logger
		self._level = level

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.log(self._level, "event %s %s", event.name, format_attrs(event.attrs))

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.log(
			self._level,
			"metric %s=%g %s",
			metric.name,
			metric.value,
			format_attrs(metric.attrs),
		)


class MemorySink:
	"""
	Keeps everything in lists. `total()` answers questions like "how many
	keys did the native widget resolve".
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def metric_names(self) -> list[str]:
		return [m.name for m in self.metrics]

	def events_named(self, name: str) -> list[TelemetryEvent]:
		return [e for e in self.events if e.name == name]

	def total(self, name: str, **attrs: Any) -> float:
		"""
		Sum of metric `name` over the records whose attrs include `attrs`.
		"""
		return sum(
			m.value
			for m in self.metrics
			if m.name == name and all(m.attrs.get(k) == v for k, v in attrs.items())
		)

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


class Telemetry:
	"""
	Telemetry facade used by the translator.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	@property
	def sink(self) -> TelemetrySink:
		return self._sink

	def event(self, name: str, attrs: Optional[dict[str, Any]] = None) -> None:
		if self._enabled:
			self._sink.emit_event(TelemetryEvent(name, time.time(), dict(attrs or {})))

	def counter(self, name: str, value: int = 1, attrs: Optional[dict[str, Any]] = None) -> None:
		if self._enabled:
			self._sink.emit_metric(TelemetryMetric(name, float(value), dict(attrs or {})))

	@contextmanager
	def timer(self, name: str, attrs: Optional[dict[str, Any]] = None) -> Iterator[None]:
		"""
		Report the block's wall time in microseconds, also when it raises.
		"""
		if not self._enabled:
			yield
			return

		start = time.perf_counter()
		try:
			yield
		finally:
			elapsed_us = (time.perf_counter() - start) * 1_000_000.0
			self._sink.emit_metric(TelemetryMetric(name, elapsed_us, dict(attrs or {})))


_telemetry: Optional[Telemetry] = None


def _build_sink(name: str, logger: Optional[logging.Logger]) -> TelemetrySink:
	if name == "log":
		return LogSink(logger or get_lib_logger("telemetry"))
	if name == "memory":
		return MemorySink()
	return NullSink()


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Initialize (and return) the global telemetry instance.

	cfg keys:
		telemetry_enabled:	bool (default False)
		telemetry_sink:		"null" | "log" | "memory" (default "null")

	Raises:
		ValueError: unknown telemetry_sink.
	"""
	global _telemetry

	sink_name = str(cfg.get("telemetry_sink", "null")).strip().lower()
	if sink_name not in TELEMETRY_SINKS:
		raise ValueError(
			f"Unknown telemetry_sink {sink_name!r}; expected one of {TELEMETRY_SINKS}"
		)

	if not coerce_bool(cfg.get("telemetry_enabled"), False):
		_telemetry = Telemetry(False, NullSink())
	else:
		_telemetry = Telemetry(True, _build_sink(sink_name, logger))

	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global telemetry instance (disabled until init_telemetry runs).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry


def _reset_telemetry_for_tests() -> None:
	global _telemetry
	_telemetry = None
