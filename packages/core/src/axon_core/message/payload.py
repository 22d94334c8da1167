"""Payload — opaque JSON body of a message."""

from __future__ import annotations

import copy

from pydantic import ConfigDict, JsonValue, RootModel

from ..primitives.json_value import json_equal


class Payload(RootModel[JsonValue]):
    """Immutable wrapper around any JSON value.

    ``value`` and item access return copies, so the wrapped value cannot
    be changed through them. ``str()`` renders the value as compact JSON,
    so a string payload keeps its quotes::

        payload = Payload("Some value")
        payload.value  # 'Some value'
        str(payload)  # '"Some value"'
    """

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> JsonValue:
        """Copy of the wrapped value."""
        return copy.deepcopy(self.root)

    def __getitem__(self, item: str | int) -> JsonValue:
        return copy.deepcopy(self.root[item])  # type: ignore[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Payload):
            return json_equal(self.root, other.root)
        return json_equal(self.root, other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.model_dump_json()
