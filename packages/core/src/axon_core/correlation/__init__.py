"""Correlation providers and propagation helpers."""

from __future__ import annotations

from .base import CorrelationProvider
from .context import (
    attach_correlation,
    correlate,
    correlation_scope,
    get_correlation_data,
    with_correlation_context,
)
from .multi import MultiCorrelationProvider
from .origin import OriginCorrelationProvider, TraceIdMode
from .simple import SimpleCorrelationProvider

__all__: list[str] = [
    "CorrelationProvider",
    "MultiCorrelationProvider",
    "OriginCorrelationProvider",
    "SimpleCorrelationProvider",
    "TraceIdMode",
    "attach_correlation",
    "correlate",
    "correlation_scope",
    "get_correlation_data",
    "with_correlation_context",
]
