"""Correlation propagation onto outgoing messages.

A processing stage computes the correlation data of the message it is
handling once, then attaches it to every message it generates, either
explicitly with :func:`correlate` or through the ambient
:func:`correlation_scope`.
"""

from __future__ import annotations

import asyncio
import contextlib
import functools
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, TypeVar

from ..domain.metadata import MetaData

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..message.base import CorrelatableMessage, Message
    from .base import CorrelationProvider

T = TypeVar("T", bound="CorrelatableMessage")

# Correlation data of the message currently being processed.
_correlation_data: ContextVar[MetaData | None] = ContextVar(
    "correlation_data", default=None
)


def correlate(
    provider: CorrelationProvider[Any], source: Message, *messages: T
) -> list[T]:
    """Return *messages* with the correlation data of *source* merged in.

    Correlation entries overwrite same-named entries already on a message.
    """
    data = provider.correlation_for(source)
    return [message.with_metadata(data) for message in messages]


def get_correlation_data() -> MetaData:
    """Correlation data of the current scope; empty outside any scope."""
    data = _correlation_data.get()
    if data is None:
        return MetaData()
    return data.model_copy(deep=True)


@contextlib.contextmanager
def correlation_scope(
    provider: CorrelationProvider[Any], source: Message
) -> Iterator[MetaData]:
    """Publish the correlation data of *source* while it is being processed.

    Scopes nest; leaving one restores the enclosing scope's data.
    """
    data = provider.correlation_for(source)
    token = _correlation_data.set(data)
    try:
        yield data.model_copy(deep=True)
    finally:
        _correlation_data.reset(token)


def attach_correlation(message: T) -> T:
    """Merge the current scope's correlation data into *message*.

    Outside a scope the message is returned unchanged.
    """
    data = _correlation_data.get()
    if not data:
        return message
    return message.with_metadata(data)


def with_correlation_context(func: Any) -> Any:
    """Decorator running an async function in a copy of the caller's context.

    The function sees the caller's correlation data; scopes it opens or
    context variables it sets do not leak back to the caller.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        # A task runs its coroutine in a copy of the current context.
        return await asyncio.create_task(func(*args, **kwargs))

    return wrapper
