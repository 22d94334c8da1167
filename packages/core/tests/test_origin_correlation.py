from __future__ import annotations

from axon_core.constants import CORRELATION_ID_KEY, TRACE_ID_KEY
from axon_core.correlation.base import CorrelationProvider
from axon_core.correlation.origin import OriginCorrelationProvider, TraceIdMode
from axon_core.message.generic import EventMessage


def test_roots_new_chain_at_message_identity(order_placed: EventMessage) -> None:
    result = OriginCorrelationProvider().correlation_for(order_placed)

    assert result[CORRELATION_ID_KEY] == order_placed.identifier().id
    assert result[TRACE_ID_KEY] == order_placed.identifier().id
    assert list(result) == [CORRELATION_ID_KEY, TRACE_ID_KEY]


def test_root_matches_entity_derivation(order_placed: EventMessage) -> None:
    result = OriginCorrelationProvider().correlation_for(order_placed)

    assert result == order_placed.identifier().as_correlation_metadata()


def test_forwards_existing_chain(order_placed: EventMessage) -> None:
    message = order_placed.add_meta(CORRELATION_ID_KEY, "c-1").add_meta(
        TRACE_ID_KEY, "t-1"
    )

    result = OriginCorrelationProvider().correlation_for(message)

    assert result.as_dict() == {CORRELATION_ID_KEY: "c-1", TRACE_ID_KEY: "t-1"}


def test_chain_survives_several_hops() -> None:
    provider = OriginCorrelationProvider()
    first = EventMessage.new("OrderPlaced", {})
    second = EventMessage.new("PaymentRequested", {}).with_metadata(
        provider.correlation_for(first)
    )
    third = EventMessage.new("PaymentCaptured", {}).with_metadata(
        provider.correlation_for(second)
    )

    result = provider.correlation_for(third)

    assert result[CORRELATION_ID_KEY] == first.identifier().id
    assert result[TRACE_ID_KEY] == first.identifier().id


def test_missing_trace_follows_correlation(order_placed: EventMessage) -> None:
    message = order_placed.add_meta(CORRELATION_ID_KEY, "c-1")

    result = OriginCorrelationProvider().correlation_for(message)

    assert result[CORRELATION_ID_KEY] == "c-1"
    assert result[TRACE_ID_KEY] == "c-1"


def test_missing_correlation_keeps_trace(order_placed: EventMessage) -> None:
    message = order_placed.add_meta(TRACE_ID_KEY, "t-1")

    result = OriginCorrelationProvider().correlation_for(message)

    assert result[CORRELATION_ID_KEY] == order_placed.identifier().id
    assert result[TRACE_ID_KEY] == "t-1"


def test_empty_correlation_id_counts_as_absent(order_placed: EventMessage) -> None:
    message = order_placed.add_meta(CORRELATION_ID_KEY, "")

    result = OriginCorrelationProvider().correlation_for(message)

    assert result[CORRELATION_ID_KEY] == order_placed.identifier().id


def test_generated_trace_mode(order_placed: EventMessage, sequence_ids) -> None:
    provider = OriginCorrelationProvider(
        trace_mode=TraceIdMode.GENERATED, id_generator=sequence_ids
    )

    first = provider.correlation_for(order_placed)
    second = provider.correlation_for(order_placed)

    assert first[CORRELATION_ID_KEY] == order_placed.identifier().id
    assert first[TRACE_ID_KEY] == "id-1"
    assert second[TRACE_ID_KEY] == "id-2"


def test_generated_trace_mode_default_generator(order_placed: EventMessage) -> None:
    provider = OriginCorrelationProvider(trace_mode="generated")  # type: ignore[arg-type]

    result = provider.correlation_for(order_placed)

    assert provider.trace_mode is TraceIdMode.GENERATED
    assert result[TRACE_ID_KEY]
    assert result[TRACE_ID_KEY] != result[CORRELATION_ID_KEY]


def test_generated_trace_mode_forwards_existing_trace(
    order_placed: EventMessage, sequence_ids
) -> None:
    provider = OriginCorrelationProvider(
        trace_mode=TraceIdMode.GENERATED, id_generator=sequence_ids
    )
    message = order_placed.add_meta(TRACE_ID_KEY, "t-1")

    assert provider.correlation_for(message)[TRACE_ID_KEY] == "t-1"


def test_correlation_mode_is_deterministic(order_placed: EventMessage) -> None:
    provider = OriginCorrelationProvider()

    assert provider.correlation_for(order_placed) == provider.correlation_for(
        order_placed
    )


def test_custom_keys(order_placed: EventMessage) -> None:
    provider = OriginCorrelationProvider(correlation_key="cid", trace_key="tid")
    message = order_placed.add_meta("cid", "c-9")

    result = provider.correlation_for(message)

    assert result.as_dict() == {"cid": "c-9", "tid": "c-9"}
    assert provider.correlation_key == "cid"
    assert provider.trace_key == "tid"


def test_does_not_touch_source(order_placed: EventMessage) -> None:
    before = order_placed.metadata()

    OriginCorrelationProvider().correlation_for(order_placed)

    assert order_placed.metadata() == before
    assert CORRELATION_ID_KEY not in order_placed.metadata()


def test_is_a_correlation_provider() -> None:
    assert isinstance(OriginCorrelationProvider(), CorrelationProvider)
