# libs/shop_common/payload.py
"""
Payload shape classification for response envelopes.

Values reaching this module are JSON-compatible (already passed through
``jsonable_encoder`` or decoded from a response body).
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple, Optional, Tuple

from .logging import get_logger
from .models import BaseResponse
from .status import OutcomeKey

logger = get_logger(__name__)

STATUS_KEY_FIELD = "statusKey"
ITEM_FIELDS = ("items", "data")
PAGINATION_FIELDS = ("paginations", "pagination")


class PayloadKind(str, Enum):
    EMPTY = "empty"
    SCALAR = "scalar"
    LIST = "list"
    PAGINATED = "paginated"
    OBJECT = "object"


class ClassifiedPayload(NamedTuple):
    kind: PayloadKind
    value: Any


def _is_paginated(raw: Mapping) -> bool:
    has_items = any(field in raw for field in ITEM_FIELDS)
    has_pagination = any(field in raw for field in PAGINATION_FIELDS)
    return has_items and has_pagination


def _paginated_value(raw: Mapping) -> dict:
    items = raw.get("items")
    if items is None:
        items = raw.get("data")
    if items is None:
        logger.debug("Paginated payload without items, defaulting to an empty list")
        items = []

    pagination = raw.get("paginations")
    if pagination is None:
        pagination = raw.get("pagination")
    return {"items": items, "pagination": pagination}


def classify_payload(raw: Any) -> ClassifiedPayload:
    """
    Classify a handler's return value.

    Args:
        raw: JSON-compatible value returned by a handler

    Returns:
        ClassifiedPayload with the detected kind and the value to emit.
        Paginated values are reshaped to ``{"items", "pagination"}``.
    """
    if raw is None:
        return ClassifiedPayload(PayloadKind.EMPTY, None)
    if isinstance(raw, (list, tuple)):
        return ClassifiedPayload(PayloadKind.LIST, list(raw))
    if isinstance(raw, Mapping):
        if _is_paginated(raw):
            return ClassifiedPayload(PayloadKind.PAGINATED, _paginated_value(raw))
        return ClassifiedPayload(PayloadKind.OBJECT, raw)
    if isinstance(raw, (str, int, float, bool)):
        return ClassifiedPayload(PayloadKind.SCALAR, raw)
    return ClassifiedPayload(PayloadKind.OBJECT, raw)


def is_empty_payload(payload: ClassifiedPayload) -> bool:
    """Empty values and objects without keys are both sent as ``{}``."""
    if payload.kind == PayloadKind.EMPTY:
        return True
    return (
        payload.kind == PayloadKind.OBJECT
        and isinstance(payload.value, Mapping)
        and len(payload.value) == 0
    )


def unwrap_envelope(raw: Any) -> Tuple[Optional[Any], Any]:
    """
    Split an optional ``{statusKey, data}`` wrapper.

    Returns:
        (declared status key or None, inner data)
    """
    if isinstance(raw, Mapping) and STATUS_KEY_FIELD in raw:
        return raw[STATUS_KEY_FIELD], raw.get("data")
    return None, raw


def build_base_response(key: OutcomeKey, data: Any = None) -> BaseResponse:
    """Wrap handler data with a pre-declared outcome key."""
    return BaseResponse(status_key=key, data=data)
