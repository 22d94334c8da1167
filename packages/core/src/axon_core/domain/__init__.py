"""Domain primitives: entity identity and metadata."""

from __future__ import annotations

from .entity import Arn, Entity
from .metadata import MetaData

__all__: list[str] = [
    "Arn",
    "Entity",
    "MetaData",
]
