"""axon-core — messages, metadata and correlation for event-driven DDD.

Pure in-process building blocks: no transport, no storage.
"""

from __future__ import annotations

from .constants import (
    CORRELATION_ID_KEY,
    ENTITY_ANONYMOUS,
    ENTITY_ID_KEY,
    ENTITY_KEY,
    ENTITY_NAME_KEY,
    EVENT_NAME_KEY,
    TRACE_ID_KEY,
    WELL_KNOWN_KEYS,
)

# ── Correlation ──────────────────────────────────────────────────
from .correlation import (
    CorrelationProvider,
    MultiCorrelationProvider,
    OriginCorrelationProvider,
    SimpleCorrelationProvider,
    TraceIdMode,
    attach_correlation,
    correlate,
    correlation_scope,
    get_correlation_data,
    with_correlation_context,
)

# ── Domain ───────────────────────────────────────────────────────
from .domain import Arn, Entity, MetaData

# ── Messages ─────────────────────────────────────────────────────
from .message import (
    CorrelatableMessage,
    EventMessage,
    Message,
    MessageTypeRegistry,
    Payload,
)

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    AxonError,
    IIDGenerator,
    MessageError,
    MessageTypeRegistrationError,
    UUID4Generator,
)

__all__: list[str] = [
    # Constants
    "CORRELATION_ID_KEY",
    "ENTITY_ANONYMOUS",
    "ENTITY_ID_KEY",
    "ENTITY_KEY",
    "ENTITY_NAME_KEY",
    "EVENT_NAME_KEY",
    "TRACE_ID_KEY",
    "WELL_KNOWN_KEYS",
    # Domain
    "Arn",
    "Entity",
    "MetaData",
    # Messages
    "CorrelatableMessage",
    "EventMessage",
    "Message",
    "MessageTypeRegistry",
    "Payload",
    # Correlation
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
    # Primitives
    "AxonError",
    "IIDGenerator",
    "MessageError",
    "MessageTypeRegistrationError",
    "UUID4Generator",
]
