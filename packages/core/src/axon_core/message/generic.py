"""Generic, untyped event message."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..domain.entity import Entity
from ..domain.metadata import MetaData
from .payload import Payload


class EventMessage(BaseModel):
    """Event message that is not tied to a domain specific type.

    The identity is an ``Entity`` named after the event and the metadata
    starts out as that entity's id/name pair. Domain specific events
    should have their own message types.

    Instances are immutable: ``set_identifier``, ``add_meta`` and
    ``with_metadata`` return a new message. ``set_identifier`` does **not**
    re-seed the entity keys already in the metadata.

    ``entity``, ``meta`` and ``body`` are the storage fields behind the
    serialized names; read through ``identifier()``, ``metadata()`` and
    ``payload()``, which hand out copies. Mutating ``meta`` or ``body``
    directly bypasses that guarantee.

    Serialized form::

        {"identifier": {"id": ..., "name": ...},
         "metadata": {"entity-id": ..., "entity-name": ...},
         "payload": ...}

    Usage::

        message = EventMessage.new("OrderPlaced", {"orderId": "A1"})
        message = message.add_meta("tenant", "acme")
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    entity: Entity = Field(alias="identifier")
    meta: MetaData = Field(alias="metadata")
    body: Payload = Field(alias="payload")

    @classmethod
    def new(cls, event_name: str, payload: object = None) -> EventMessage:
        """Build an event called *event_name* carrying *payload*."""
        identifier = Entity.from_name(event_name)
        body = payload if isinstance(payload, Payload) else Payload(payload)
        return cls(entity=identifier, meta=identifier.as_metadata(), body=body)

    # ── Builders ─────────────────────────────────────────────────

    def set_identifier(self, identifier: Entity | str) -> EventMessage:
        """Copy with a new identity; a plain string becomes the entity name."""
        return self.model_copy(update={"entity": Entity.coerce(identifier)})

    def add_meta(self, key: str, value: object) -> EventMessage:
        """Copy with *key* set to *value* in the metadata."""
        return self.model_copy(update={"meta": self.metadata().add(key, value)})

    def with_metadata(self, metadata: MetaData) -> EventMessage:
        """Copy with *metadata* merged in; incoming entries win."""
        return self.model_copy(update={"meta": self.meta.merge(metadata)})

    # ── Message ──────────────────────────────────────────────────

    def identifier(self) -> Entity:
        return self.entity

    def metadata(self) -> MetaData:
        return self.meta.model_copy(deep=True)

    def payload(self) -> Payload:
        return self.body.model_copy(deep=True)

    def __hash__(self) -> int:
        return hash(self.entity)

    def __str__(self) -> str:
        return str(self.entity)
