"""Property tests for the response envelope.

Construction round-trips every field, assignment touches only its own field,
and the payload is held by reference, never copied.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from src.models.responses import Response

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

statuses = st.booleans()

messages = st.one_of(st.none(), st.text(max_size=100))

# JSON-compatible payloads of arbitrary shape
json_payloads = st.recursive(
    st.one_of(
        st.none(),
        st.booleans(),
        st.integers(min_value=-(2**53), max_value=2**53),
        st.floats(allow_nan=False, allow_infinity=False),
        st.text(max_size=20),
    ),
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(st.text(max_size=10), children, max_size=5),
    ),
    max_leaves=20,
)

# Mutable containers, for aliasing checks
mutable_payloads = st.one_of(
    st.lists(st.integers(), max_size=5),
    st.dictionaries(st.text(max_size=10), st.integers(), max_size=5),
)


@settings(max_examples=100)
@given(status=statuses, message=messages, payload=json_payloads)
def test_construction_round_trips_fields(status: bool, message: str | None, payload: object) -> None:
    resp = Response.of(status, message, payload)

    assert resp.status is status
    assert resp.message == message
    assert resp.additional_payload is payload


@settings(max_examples=100)
@given(
    status=statuses,
    message=messages,
    payload=json_payloads,
    new_status=statuses,
    new_message=messages,
    new_payload=json_payloads,
    field=st.sampled_from(["status", "message", "additional_payload"]),
)
def test_assignment_changes_only_target_field(
    status: bool,
    message: str | None,
    payload: object,
    new_status: bool,
    new_message: str | None,
    new_payload: object,
    field: str,
) -> None:
    resp = Response.of(status, message, payload)
    before = {"status": status, "message": message, "additional_payload": payload}
    new_value = {
        "status": new_status,
        "message": new_message,
        "additional_payload": new_payload,
    }[field]

    setattr(resp, field, new_value)

    assert getattr(resp, field) is new_value
    for other, value in before.items():
        if other != field:
            assert getattr(resp, other) == value
    if field != "additional_payload":
        assert resp.additional_payload is payload


@settings(max_examples=100)
@given(payload=mutable_payloads, status=statuses)
def test_shared_payload_mutations_are_visible(payload: list | dict, status: bool) -> None:
    resp = Response.of(status, "shared", payload)

    if isinstance(payload, list):
        payload.append(42)
        assert resp.additional_payload[-1] == 42
    else:
        payload["__added__"] = 42
        assert resp.additional_payload["__added__"] == 42


@settings(max_examples=100)
@given(status=statuses, message=messages, payload=json_payloads)
def test_wire_form_has_exactly_three_keys(status: bool, message: str | None, payload: object) -> None:
    wire = Response.of(status, message, payload).to_wire()

    assert set(wire) == {"status", "message", "additionalPayload"}
    assert wire["status"] is status
    assert wire["message"] == message
    assert Response.from_wire(wire) == Response.of(status, message, payload)


@settings(max_examples=50)
@given(status=statuses, message=messages, payload=mutable_payloads, new_message=messages)
def test_with_methods_leave_original_untouched(
    status: bool, message: str | None, payload: list | dict, new_message: str | None
) -> None:
    original = Response.of(status, message, payload)

    copy = original.with_status(not status).with_message(new_message)

    assert original.status is status
    assert original.message == message
    assert copy.status is (not status)
    assert copy.message == new_message
    assert copy.additional_payload is payload
