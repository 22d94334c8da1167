"""Entity — immutable ``(id, name)`` identity of a message or resource."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import ENTITY_ANONYMOUS
from ..primitives.id_generator import DEFAULT_ID_GENERATOR
from .metadata import MetaData

if TYPE_CHECKING:
    from ..primitives.id_generator import IIDGenerator


@runtime_checkable
class Arn(Protocol):
    """Axon Resource Name, shaped like an AWS ARN.

    Implement on any resource (a message, an aggregate, ...) that should
    render its identity as a single naming string::

        class EmailReceived:
            def arn_string(self) -> str:
                return f"axon:email:from-{self.sender}:to-{self.to}/{self.id}"

            def arn_name(self) -> str:
                return "email"
    """

    def arn_string(self) -> str:
        """Full resource name."""
        ...

    def arn_name(self) -> str:
        """Short name of the resource kind."""
        ...


def _next_id() -> str:
    return DEFAULT_ID_GENERATOR.next_id()


class Entity(BaseModel):
    """Unique identity of an element.

    ``id`` defaults to a random UUIDv4 and ``name`` to
    :data:`~axon_core.constants.ENTITY_ANONYMOUS`. The name does not need
    to be unique. Entities are ordered by ``(id, name)`` so they can be
    sorted or used as mapping keys.

    Usage::

        entity = Entity.new("123", "SomeEvent")
        str(entity)  # "SomeEvent:123"
        Entity.from_name("SomeEvent").id  # fresh uuid
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_next_id)
    name: str = ENTITY_ANONYMOUS

    @field_validator("id", "name", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> str:
        return value if isinstance(value, str) else str(value)

    # ── Construction ─────────────────────────────────────────────

    @classmethod
    def new(cls, id: object, name: object) -> Entity:  # noqa: A002
        """Build from caller supplied values; anything ``str()`` accepts."""
        return cls(id=id, name=name)

    @classmethod
    def from_name(
        cls, name: object, id_generator: IIDGenerator | None = None
    ) -> Entity:
        """Build an entity called *name* with a freshly generated id."""
        generator = id_generator or DEFAULT_ID_GENERATOR
        return cls(id=generator.next_id(), name=name)

    @classmethod
    def default(cls) -> Entity:
        """Anonymous entity with a fresh id."""
        return cls()

    @classmethod
    def coerce(cls, value: Entity | str) -> Entity:
        """Return *value* as is if it is an ``Entity``, else use it as a name."""
        if isinstance(value, Entity):
            return value
        return cls.from_name(value)

    # ── Derivations ──────────────────────────────────────────────

    def as_metadata(self) -> MetaData:
        """MetaData holding this entity under the entity id/name keys."""
        return MetaData.from_entity(self)

    def as_correlation_metadata(self, trace_id: str | None = None) -> MetaData:
        """MetaData rooting a causal chain at this entity.

        The correlation id is this entity's id; the trace id defaults to it.
        """
        return MetaData.correlation_of(self.id, trace_id or self.id)

    # ── Arn ──────────────────────────────────────────────────────

    def arn_string(self) -> str:
        return f"arn:{self.name}/{self.id}"

    def arn_name(self) -> str:
        return self.name

    # ── Ordering ─────────────────────────────────────────────────

    def _sort_key(self) -> tuple[str, str]:
        return (self.id, self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        return f"{self.name}:{self.id}"
