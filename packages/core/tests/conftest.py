"""Shared fixtures for axon-core tests."""

from __future__ import annotations

import itertools

import pytest

from axon_core.message.generic import EventMessage


class SequenceIdGenerator:
    """Deterministic ids: ``<prefix>-1``, ``<prefix>-2``, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"


@pytest.fixture
def sequence_ids() -> SequenceIdGenerator:
    return SequenceIdGenerator()


@pytest.fixture
def order_placed() -> EventMessage:
    """Fresh event with no correlation data yet."""
    return EventMessage.new("OrderPlaced", {"orderId": "A1"}).add_meta(
        "tenant", "acme"
    )
