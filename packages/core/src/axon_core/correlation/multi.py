"""MultiCorrelationProvider — chains providers, later ones win."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic

from ..domain.metadata import MetaData
from .base import M

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .base import CorrelationProvider

logger = logging.getLogger("axon.correlation")


class MultiCorrelationProvider(Generic[M]):
    """Runs a sequence of providers and merges their results in order.

    When two providers produce the same key, the provider that comes
    **later** in the sequence wins. Put the provider whose values must
    prevail last.

    Usage::

        provider = MultiCorrelationProvider(
            [SimpleCorrelationProvider(["tenant"]), OriginCorrelationProvider()]
        )
    """

    __slots__ = ("_providers",)

    def __init__(self, providers: Iterable[CorrelationProvider[M]]) -> None:
        self._providers: tuple[CorrelationProvider[M], ...] = tuple(providers)

    @property
    def providers(self) -> tuple[CorrelationProvider[M], ...]:
        return self._providers

    def correlation_for(self, message: M) -> MetaData:
        result = MetaData()
        for provider in self._providers:
            data = provider.correlation_for(message)
            overridden = [key for key in data if key in result]
            if overridden:
                logger.debug(
                    "%s overrides correlation keys %s",
                    type(provider).__name__,
                    overridden,
                )
            result = result.merge(data)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._providers)!r})"
