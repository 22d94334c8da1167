"""Exceptions for axon-core.

Building messages and computing correlation data never fails; only
misuse of the registries raises.
"""

from __future__ import annotations


class AxonError(Exception):
    """Root exception for the axon toolkit."""


class MessageError(AxonError):
    """Base class for all message-related errors."""


class MessageTypeRegistrationError(MessageError):
    """Raised when a message type name is already bound to another class.

    Usage: MessageTypeRegistry raises this when two different classes are
    registered under the same type name.
    """

    def __init__(self, name: str, existing: type, candidate: type) -> None:
        self.name = name
        self.existing = existing
        self.candidate = candidate
        super().__init__(
            f"Duplicate message type {name!r}: {existing.__name__} already "
            f"registered, cannot register {candidate.__name__}"
        )
