from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from ..message.base import Message

if TYPE_CHECKING:
    from ..domain.metadata import MetaData

M = TypeVar("M", bound=Message)
M_contra = TypeVar("M_contra", bound=Message, contravariant=True)


@runtime_checkable
class CorrelationProvider(Protocol[M_contra]):
    """
    Decides which data of a message is attached as correlation data to
    the messages generated while processing it.

    Implementations must be pure (no I/O, no mutation of the source
    message) and immutable once constructed, so one instance can be
    shared by every processing thread.
    """

    def correlation_for(self, message: M_contra) -> MetaData:
        """Entries to attach to messages generated while handling *message*."""
        ...
