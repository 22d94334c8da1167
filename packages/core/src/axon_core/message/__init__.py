"""Messages: the capability, payloads, the generic event message, registry."""

from __future__ import annotations

from .base import CorrelatableMessage, Message
from .generic import EventMessage
from .payload import Payload
from .registry import MessageTypeRegistry

__all__: list[str] = [
    "CorrelatableMessage",
    "EventMessage",
    "Message",
    "MessageTypeRegistry",
    "Payload",
]
