"""OriginCorrelationProvider — keeps the causal chain identifiers flowing."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Generic

from ..constants import CORRELATION_ID_KEY, TRACE_ID_KEY
from ..domain.metadata import MetaData
from ..primitives.id_generator import DEFAULT_ID_GENERATOR
from .base import M

if TYPE_CHECKING:
    from pydantic import JsonValue

    from ..primitives.id_generator import IIDGenerator

logger = logging.getLogger("axon.correlation")


class TraceIdMode(str, Enum):
    """How the trace id is derived when the source message carries none."""

    #: Trace id equals the correlation id.
    CORRELATION = "correlation"
    #: Trace id is a freshly generated id.
    GENERATED = "generated"


def _is_absent(value: JsonValue) -> bool:
    return value is None or value == ""


class OriginCorrelationProvider(Generic[M]):
    """Forwards the correlation and trace ids of the source message.

    A source message without a correlation id is treated as the root of a
    new causal chain: its own entity id becomes the correlation id. A
    missing trace id is derived according to *trace_mode*. Each key is
    handled on its own, so a message carrying only one of them keeps it
    and gets the other derived.

    Usage::

        provider = OriginCorrelationProvider()
        root = EventMessage.new("OrderPlaced", {"orderId": "A1"})
        provider.correlation_for(root)["correlation-id"] == root.identifier().id
    """

    __slots__ = ("_correlation_key", "_trace_key", "_trace_mode", "_id_generator")

    def __init__(
        self,
        *,
        correlation_key: str = CORRELATION_ID_KEY,
        trace_key: str = TRACE_ID_KEY,
        trace_mode: TraceIdMode = TraceIdMode.CORRELATION,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self._correlation_key = correlation_key
        self._trace_key = trace_key
        self._trace_mode = TraceIdMode(trace_mode)
        self._id_generator = id_generator or DEFAULT_ID_GENERATOR

    @property
    def correlation_key(self) -> str:
        return self._correlation_key

    @property
    def trace_key(self) -> str:
        return self._trace_key

    @property
    def trace_mode(self) -> TraceIdMode:
        return self._trace_mode

    def correlation_for(self, message: M) -> MetaData:
        metadata = message.metadata()

        correlation_id = metadata.get(self._correlation_key)
        if _is_absent(correlation_id):
            correlation_id = message.identifier().id
            logger.debug(
                "No %s on %s, rooting a new chain", self._correlation_key, message
            )

        trace_id = metadata.get(self._trace_key)
        if _is_absent(trace_id):
            if self._trace_mode is TraceIdMode.GENERATED:
                trace_id = self._id_generator.next_id()
            else:
                trace_id = correlation_id

        return MetaData.correlation_of(
            correlation_id,
            trace_id,
            correlation_key=self._correlation_key,
            trace_key=self._trace_key,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(correlation_key={self._correlation_key!r}, "
            f"trace_key={self._trace_key!r}, trace_mode={self._trace_mode.value!r})"
        )
