from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing_extensions import Self

    from ..domain.entity import Entity
    from ..domain.metadata import MetaData
    from .payload import Payload


@runtime_checkable
class Message(Protocol):
    """
    A unit of domain activity: a command, an event, a query.

    Accessors hand out values the caller owns; mutating the returned
    ``MetaData`` never changes the message.
    """

    def identifier(self) -> Entity:
        """Identity of this message instance."""
        ...

    def metadata(self) -> MetaData:
        """Cross-cutting attributes (entity, correlation, business keys)."""
        ...

    def payload(self) -> Payload:
        """Typed body of the message."""
        ...


@runtime_checkable
class CorrelatableMessage(Message, Protocol):
    """A message that can return a copy of itself with extra metadata."""

    def with_metadata(self, metadata: MetaData) -> Self:
        """Copy with *metadata* merged in; incoming entries win."""
        ...
