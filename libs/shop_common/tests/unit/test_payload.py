import pytest

from libs.shop_common.payload import (
    PayloadKind,
    build_base_response,
    classify_payload,
    is_empty_payload,
    unwrap_envelope,
)
from libs.shop_common.status import OutcomeKey


@pytest.mark.unit
class TestClassifyPayload:
    def test_none_is_empty(self):
        assert classify_payload(None).kind == PayloadKind.EMPTY

    def test_empty_list_is_list(self):
        result = classify_payload([])
        assert result.kind == PayloadKind.LIST
        assert result.value == []

    def test_items_with_paginations(self):
        result = classify_payload({"items": [1], "paginations": {"p": 1}})
        assert result.kind == PayloadKind.PAGINATED
        assert result.value == {"items": [1], "pagination": {"p": 1}}

    def test_data_with_pagination(self):
        result = classify_payload({"data": [{"id": 1}], "pagination": {"currentPage": 2}})
        assert result.kind == PayloadKind.PAGINATED
        assert result.value == {"items": [{"id": 1}], "pagination": {"currentPage": 2}}

    def test_paginated_without_items_defaults_to_empty_list(self):
        result = classify_payload({"items": None, "paginations": {"totalItems": 0}})
        assert result.kind == PayloadKind.PAGINATED
        assert result.value["items"] == []

    def test_items_without_pagination_is_object(self):
        raw = {"items": [1, 2]}
        result = classify_payload(raw)
        assert result.kind == PayloadKind.OBJECT
        assert result.value == raw

    @pytest.mark.parametrize("raw", ["text", 0, 3.5, True, False])
    def test_primitives_are_scalar(self, raw):
        result = classify_payload(raw)
        assert result.kind == PayloadKind.SCALAR
        assert result.value == raw

    def test_empty_object_is_treated_as_empty(self):
        result = classify_payload({})
        assert result.kind == PayloadKind.OBJECT
        assert is_empty_payload(result)

    def test_non_empty_values_are_not_empty(self):
        assert not is_empty_payload(classify_payload({"id": 1}))
        assert not is_empty_payload(classify_payload([]))
        assert not is_empty_payload(classify_payload(0))
        assert not is_empty_payload(classify_payload(""))


@pytest.mark.unit
class TestUnwrapEnvelope:
    def test_wrapped_value(self):
        assert unwrap_envelope({"statusKey": "unchanged", "data": {"id": 1}}) == (
            "unchanged",
            {"id": 1},
        )

    def test_wrapped_without_data(self):
        assert unwrap_envelope({"statusKey": "success"}) == ("success", None)

    def test_plain_values_pass_through(self):
        raw = {"id": 1, "data": "x"}
        assert unwrap_envelope(raw) == (None, raw)
        assert unwrap_envelope([1]) == (None, [1])
        assert unwrap_envelope(None) == (None, None)

    def test_build_base_response_serializes_with_status_key(self):
        wrapped = build_base_response(OutcomeKey.UNCHANGED, {"id": 1})
        dumped = wrapped.model_dump(mode="json", by_alias=True)
        assert dumped == {"statusKey": "unchanged", "data": {"id": 1}}
        assert unwrap_envelope(dumped) == ("unchanged", {"id": 1})
