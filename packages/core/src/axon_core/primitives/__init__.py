"""Primitives: exceptions, ID generation."""

from __future__ import annotations

from .exceptions import AxonError, MessageError, MessageTypeRegistrationError
from .id_generator import DEFAULT_ID_GENERATOR, IIDGenerator, UUID4Generator
from .json_value import json_equal

__all__ = [
    "AxonError",
    "DEFAULT_ID_GENERATOR",
    "IIDGenerator",
    "MessageError",
    "MessageTypeRegistrationError",
    "UUID4Generator",
    "json_equal",
]
