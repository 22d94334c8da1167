"""MetaData — ordered key/value attributes carried by a message."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from pydantic import Field, JsonValue, RootModel, TypeAdapter

from ..constants import (
    CORRELATION_ID_KEY,
    ENTITY_ID_KEY,
    ENTITY_NAME_KEY,
    TRACE_ID_KEY,
)
from ..primitives.json_value import json_equal

if TYPE_CHECKING:
    from collections.abc import ItemsView, Iterable, Iterator, KeysView

    from typing_extensions import Self

    from .entity import Entity

_json_value: TypeAdapter[JsonValue] = TypeAdapter(JsonValue)


class MetaData(RootModel[dict[str, JsonValue]]):
    """Ordered mapping of string keys to JSON values.

    Keys are unique and a later ``add`` for the same key overwrites the
    earlier value in place. Iteration follows insertion order, equality
    does not. Serializes as a plain JSON object.

    Usage::

        meta = MetaData().add("tenant", "acme").add("priority", 3)
        meta.merge(MetaData({"priority": 5}))["priority"]  # 5
    """

    root: dict[str, JsonValue] = Field(default_factory=dict)

    # ── Mutation ─────────────────────────────────────────────────

    def add(self, key: str, value: object) -> Self:
        """Insert or overwrite *key*. Returns ``self`` for chaining."""
        self.root[key] = _json_value.validate_python(value)
        return self

    # ── Mapping access ───────────────────────────────────────────

    def get(self, key: str, default: JsonValue = None) -> JsonValue:
        return self.root.get(key, default)

    def __getitem__(self, key: str) -> JsonValue:
        return self.root[key]

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def keys(self) -> KeysView[str]:
        return self.root.keys()

    def items(self) -> ItemsView[str, JsonValue]:
        return self.root.items()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetaData):
            return NotImplemented
        return json_equal(self.root, other.root)

    __hash__ = None  # type: ignore[assignment]

    def as_dict(self) -> dict[str, JsonValue]:
        """Deep copy of the entries as a plain ``dict``."""
        return copy.deepcopy(self.root)

    # ── Derivations (always return a new instance) ───────────────

    def select(self, keys: Iterable[str]) -> MetaData:
        """Entries whose key is in *keys*, in this instance's order.

        Keys that are not present are skipped.
        """
        wanted = set(keys)
        return MetaData(
            {k: copy.deepcopy(v) for k, v in self.root.items() if k in wanted}
        )

    def merge(self, other: MetaData) -> MetaData:
        """Union of both instances; *other* wins on key collision."""
        merged = self.as_dict()
        merged.update(other.as_dict())
        return MetaData(merged)

    @classmethod
    def merge_all(cls, metadatas: Iterable[MetaData]) -> MetaData:
        """Fold *metadatas* left to right; later entries win."""
        result = cls()
        for metadata in metadatas:
            result = result.merge(metadata)
        return result

    # ── Seeding ──────────────────────────────────────────────────

    @classmethod
    def from_entity(cls, entity: Entity) -> MetaData:
        return cls({ENTITY_ID_KEY: entity.id, ENTITY_NAME_KEY: entity.name})

    @classmethod
    def correlation_of(
        cls,
        correlation_id: JsonValue,
        trace_id: JsonValue,
        *,
        correlation_key: str = CORRELATION_ID_KEY,
        trace_key: str = TRACE_ID_KEY,
    ) -> MetaData:
        return cls({correlation_key: correlation_id, trace_key: trace_id})
