"""MessageTypeRegistry — maps message type names to their classes for hydration."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from ..primitives.exceptions import MessageTypeRegistrationError

logger = logging.getLogger("axon.message")


class MessageTypeRegistry:
    """Registry for mapping ``message_type_name: str`` → message class.

    Used to reconstruct messages from persisted or transmitted payloads.

    **Explicit registration** is required via ``register(name, cls)``.
    Create instances per application context for isolation.

    Usage::

        registry = MessageTypeRegistry()
        registry.register("EventMessage", EventMessage)
        message = registry.hydrate("EventMessage", data)
    """

    def __init__(self) -> None:
        self._registry: dict[str, type[BaseModel]] = {}

    def register(self, name: str, message_class: type[BaseModel]) -> None:
        """Register *message_class* under *name*.

        Re-registering the same class is a no-op; a different class under
        a taken name raises ``MessageTypeRegistrationError``.
        """
        existing = self._registry.get(name)
        if existing is not None and existing is not message_class:
            raise MessageTypeRegistrationError(name, existing, message_class)
        self._registry[name] = message_class
        logger.debug("Registered message type %s -> %s", name, message_class.__name__)

    def get(self, message_type: str) -> type[BaseModel] | None:
        """Look up a message class by type name."""
        return self._registry.get(message_type)

    def has(self, message_type: str) -> bool:
        """Return ``True`` if *message_type* is registered."""
        return message_type in self._registry

    def hydrate(self, message_type: str, data: dict[str, Any]) -> BaseModel | None:
        """Reconstruct a message from its type name and serialized dict.

        Returns ``None`` if the type is not registered or *data* is invalid.
        """
        message_class = self.get(message_type)
        if message_class is None:
            logger.debug("Unknown message type %s", message_type)
            return None

        try:
            return message_class.model_validate(data)
        except (TypeError, ValueError):
            logger.debug("Could not hydrate %s", message_type, exc_info=True)
            return None

    def list_registered(self) -> list[str]:
        """Return all registered message type names."""
        return list(self._registry.keys())

    def clear(self) -> None:
        """Remove all registrations (testing utility)."""
        self._registry.clear()
