"""Well-known metadata keys shared by every component."""

from __future__ import annotations

# ── Entity ───────────────────────────────────────────────────────
ENTITY_KEY = "entity"
ENTITY_ID_KEY = "entity-id"
ENTITY_NAME_KEY = "entity-name"

#: Name given to an ``Entity`` created without one.
ENTITY_ANONYMOUS = "anonymous"

# ── Events ───────────────────────────────────────────────────────
EVENT_NAME_KEY = "event-name"

# ── Correlation ──────────────────────────────────────────────────
CORRELATION_ID_KEY = "correlation-id"
TRACE_ID_KEY = "trace-id"

WELL_KNOWN_KEYS: frozenset[str] = frozenset(
    {
        ENTITY_ID_KEY,
        ENTITY_NAME_KEY,
        CORRELATION_ID_KEY,
        TRACE_ID_KEY,
        EVENT_NAME_KEY,
    }
)

__all__ = [
    "CORRELATION_ID_KEY",
    "ENTITY_ANONYMOUS",
    "ENTITY_ID_KEY",
    "ENTITY_KEY",
    "ENTITY_NAME_KEY",
    "EVENT_NAME_KEY",
    "TRACE_ID_KEY",
    "WELL_KNOWN_KEYS",
]
