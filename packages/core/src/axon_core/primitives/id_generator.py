"""Identifier generation for entities and generated trace ids."""

from __future__ import annotations

import uuid
from typing import Protocol


class IIDGenerator(Protocol):
    """Source of unique identifier strings.

    Swap in a deterministic sequence in tests, or a time ordered scheme
    (UUIDv7, Snowflake) where ids double as sort keys.
    """

    def next_id(self) -> str: ...


class UUID4Generator:
    """Random UUIDv4 ids in canonical 36 character text form."""

    def next_id(self) -> str:
        return str(uuid.uuid4())


DEFAULT_ID_GENERATOR: IIDGenerator = UUID4Generator()
