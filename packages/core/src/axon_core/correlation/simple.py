"""SimpleCorrelationProvider — copies a fixed set of metadata keys."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic

from .base import M

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..domain.metadata import MetaData


class SimpleCorrelationProvider(Generic[M]):
    """Copies the configured metadata keys verbatim from the source message.

    Keys missing on the source are left out of the result. Entries keep
    the order they have in the source metadata.

    Usage::

        provider = SimpleCorrelationProvider(["tenant", "user-id"])
        provider.correlation_for(message)  # MetaData with at most those keys
    """

    __slots__ = ("_keys",)

    def __init__(self, keys: Iterable[str]) -> None:
        if isinstance(keys, str):
            keys = (keys,)
        self._keys: frozenset[str] = frozenset(keys)

    @property
    def keys(self) -> frozenset[str]:
        return self._keys

    def correlation_for(self, message: M) -> MetaData:
        return message.metadata().select(self._keys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._keys)!r})"
