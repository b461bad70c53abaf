# libs/shop_common/status.py
"""
Outcome (status key) resolution shared by the HTTP and GraphQL layers.
"""

from enum import Enum
from typing import Optional

from fastapi import status

NO_CONTENT = status.HTTP_204_NO_CONTENT


class OutcomeKey(str, Enum):
    """
    Semantic result of a handler's business logic.

    The value is the last segment of every response message key, e.g.
    ``common.product.action.update.unchanged``.
    """

    SUCCESS = "success"
    FAILED = "failed"
    UNCHANGED = "unchanged"
    PENDING = "pending"
    SEND_MAIL_FAILED = "sendMailFailed"
    INVALID_OR_EXPIRED = "invalidOrExpired"
    IS_VERIFIED = "isVerified"
    ALREADY_VERIFIED = "alreadyVerified"

    @classmethod
    def parse(cls, value: object) -> Optional["OutcomeKey"]:
        """Return the matching key, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def is_success_status(status_code: int) -> bool:
    return status.HTTP_200_OK <= status_code < status.HTTP_300_MULTIPLE_CHOICES


def resolve_status_key(declared: Optional[object], status_code: int) -> OutcomeKey:
    """
    Pick the outcome key for a response.

    A declared key wins when it is a known member. Otherwise the key is
    inferred from the transport status code: 204 means nothing changed,
    the rest of the 2xx range is a success, anything else failed.
    """
    key = OutcomeKey.parse(declared) if declared is not None else None
    if key is not None:
        return key
    if status_code == NO_CONTENT:
        return OutcomeKey.UNCHANGED
    if is_success_status(status_code):
        return OutcomeKey.SUCCESS
    return OutcomeKey.FAILED


def resolve_success(status_code: int, key: OutcomeKey) -> bool:
    """A response is successful only if both the status code and the key agree."""
    if not is_success_status(status_code):
        return False
    if key == OutcomeKey.FAILED:
        return False
    return True
