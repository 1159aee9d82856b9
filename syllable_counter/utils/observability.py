"""Structured logging and metric helpers shared across the package."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, Optional

from prometheus_client import REGISTRY, Counter, Histogram


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Adapter that renders bound and per-call context inline with messages."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra)
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra)
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            try:
                payload = json.dumps(event_context, sort_keys=True, default=str)
            except TypeError:
                payload = json.dumps({k: str(v) for k, v in event_context.items()})
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a project logger with optional bound context."""

    return StructuredLoggerAdapter(logging.getLogger(name), context)


class _MetricWrapper:
    """Base wrapper providing ``labels`` passthrough for metrics."""

    def __init__(self, impl: Any = None) -> None:
        self._impl = impl

    def labels(self, **labels: Any):
        if self._impl is None:
            return self.__class__(None)
        return self.__class__(self._impl.labels(**labels))


class CounterHandle(_MetricWrapper):
    def inc(self, amount: float = 1.0) -> None:
        if self._impl is not None:
            self._impl.inc(amount)


class HistogramHandle(_MetricWrapper):
    def observe(self, value: float) -> None:
        if self._impl is not None:
            self._impl.observe(value)


def _registered(name: str) -> Any:
    # prometheus_client registers counters under both ``name`` and ``name_total``.
    collectors = getattr(REGISTRY, "_names_to_collectors", {})
    return collectors.get(name) or collectors.get(f"{name}_total")


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> CounterHandle:
    """Create a counter, reusing an existing collector registered under ``name``."""

    try:
        impl = Counter(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        impl = _registered(name)
    return CounterHandle(impl)


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> HistogramHandle:
    """Create a histogram, reusing an existing collector registered under ``name``."""

    try:
        impl = Histogram(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        impl = _registered(name)
    return HistogramHandle(impl)


__all__ = [
    "StructuredLoggerAdapter",
    "get_logger",
    "CounterHandle",
    "HistogramHandle",
    "create_counter",
    "create_histogram",
]
