from __future__ import annotations

import pytest
from pydantic import ValidationError

from axon_core.constants import (
    CORRELATION_ID_KEY,
    ENTITY_ANONYMOUS,
    ENTITY_ID_KEY,
    ENTITY_NAME_KEY,
    TRACE_ID_KEY,
)
from axon_core.domain.entity import Arn, Entity


def test_new_entity() -> None:
    entity = Entity.new("123", "SomeEvent")

    assert entity.id == "123"
    assert entity.name == "SomeEvent"
    assert str(entity) == "SomeEvent:123"


def test_new_entity_stringifies_inputs() -> None:
    entity = Entity.new(42, 7)

    assert entity.id == "42"
    assert entity.name == "7"


def test_from_name_generates_fresh_ids() -> None:
    first = Entity.from_name("hello")
    second = Entity.from_name("hello")

    assert first.name == "hello"
    assert first.id
    assert len(first.id) == 36
    assert first.id != second.id


def test_from_name_uses_given_generator(sequence_ids) -> None:
    entity = Entity.from_name("hello", id_generator=sequence_ids)

    assert entity.id == "id-1"
    assert Entity.from_name("hello", id_generator=sequence_ids).id == "id-2"


def test_default_entity() -> None:
    entity = Entity.default()

    assert entity.name == ENTITY_ANONYMOUS
    assert entity.id
    assert Entity().name == ENTITY_ANONYMOUS


def test_entity_is_immutable() -> None:
    entity = Entity.new("1", "a")

    with pytest.raises(ValidationError):
        entity.id = "2"  # type: ignore[misc]


def test_entity_equality_and_hash() -> None:
    a = Entity.new("1", "a")
    b = Entity.new("1", "a")

    assert a == b
    assert hash(a) == hash(b)
    assert a != Entity.new("1", "b")
    assert {a: "value"}[b] == "value"


def test_entity_ordering_by_id_then_name() -> None:
    entities = [
        Entity.new("b", "x"),
        Entity.new("a", "y"),
        Entity.new("a", "x"),
    ]

    assert sorted(entities) == [
        Entity.new("a", "x"),
        Entity.new("a", "y"),
        Entity.new("b", "x"),
    ]
    assert Entity.new("a", "x") <= Entity.new("a", "x")
    assert Entity.new("b", "a") > Entity.new("a", "z")


def test_coerce() -> None:
    entity = Entity.new("1", "a")

    assert Entity.coerce(entity) is entity
    coerced = Entity.coerce("SomethingHappened")
    assert coerced.name == "SomethingHappened"
    assert coerced.id


def test_arn() -> None:
    entity = Entity.new("123", "hello-event")

    assert isinstance(entity, Arn)
    assert entity.arn_string() == "arn:hello-event/123"
    assert entity.arn_name() == "hello-event"


def test_as_metadata() -> None:
    entity = Entity.new("123", "SomeEvent")

    assert entity.as_metadata().as_dict() == {
        ENTITY_ID_KEY: "123",
        ENTITY_NAME_KEY: "SomeEvent",
    }


def test_as_correlation_metadata() -> None:
    entity = Entity.new("123", "SomeEvent")

    assert entity.as_correlation_metadata().as_dict() == {
        CORRELATION_ID_KEY: "123",
        TRACE_ID_KEY: "123",
    }
    assert entity.as_correlation_metadata("t-1")[TRACE_ID_KEY] == "t-1"


def test_equality_defers_to_other_types() -> None:
    entity = Entity.new("1", "a")

    assert entity.__eq__("1:a") is NotImplemented
    assert entity != "1:a"
    assert entity != ("1", "a")
