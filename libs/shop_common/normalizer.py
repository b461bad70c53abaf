# libs/shop_common/normalizer.py
"""
Response normalization shared by the HTTP and GraphQL transport adapters.

Both adapters hand the normalizer a JSON-compatible handler result plus the
resource/action pair for the route; the normalizer resolves the outcome key,
the localized message and the payload shape.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from .config import ResponseConfig
from .i18n import TranslationService, resolve_message
from .logging import get_logger
from .models import GraphQLEnvelope, HttpEnvelope
from .payload import PayloadKind, classify_payload, is_empty_payload, unwrap_envelope
from .status import NO_CONTENT, OutcomeKey, resolve_status_key, resolve_success

logger = get_logger(__name__)

DEFAULT_ACTION_PREFIX = "action"


class ResponseNormalizer:
    """
    Builds response envelopes.

    Stateless apart from the read-only translator and configuration, so a
    single instance is shared by all requests.
    """

    def __init__(
        self,
        translator: TranslationService,
        config: Optional[ResponseConfig] = None,
    ):
        self.translator = translator
        self.config = config or ResponseConfig()

        prefix = self.config.message_action_prefix
        if not prefix:
            logger.warning(
                f"MESSAGE_ACTION_PREFIX is empty - fallback to '{DEFAULT_ACTION_PREFIX}'"
            )
            prefix = DEFAULT_ACTION_PREFIX
        self.action_prefix = prefix

    def message_key(self, resource: str, action: str, key: OutcomeKey) -> str:
        return f"common.{resource}.{self.action_prefix}.{action}.{key.value}"

    def normalize_http(
        self,
        raw: Any,
        status_code: int,
        resource: str,
        action: str,
        lang: Optional[str] = None,
    ) -> HttpEnvelope:
        """
        Shape an HTTP handler result.

        Args:
            raw: Handler result, optionally wrapped as ``{statusKey, data}``
            status_code: Status code the transport is about to send
            resource: Resource name for the message key
            action: Action name for the message key
            lang: Language for the message

        Returns:
            HttpEnvelope whose ``status_code`` is the code to send; an
            ``unchanged`` outcome always sends 204.
        """
        declared, inner = unwrap_envelope(raw)
        key = resolve_status_key(declared, status_code)
        if key == OutcomeKey.UNCHANGED:
            status_code = NO_CONTENT

        message = resolve_message(
            self.translator,
            self.message_key(resource, action, key),
            self.config.fallback_message,
            lang=lang,
        )

        classified = classify_payload(inner)
        if is_empty_payload(classified):
            logger.debug(f"Empty payload ({classified.kind.value}) for {resource}.{action}")
            payload: Any = {}
        else:
            payload = classified.value

        return HttpEnvelope(
            success=resolve_success(status_code, key),
            status_code=status_code,
            message=message,
            payload=payload,
        )

    def normalize_graphql(
        self,
        raw: Any,
        resource: str,
        action: str,
        lang: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Shape a GraphQL resolver result.

        Results that already carry ``success`` and ``message`` are returned
        unchanged. Errors are raised by resolvers, so everything else is a
        success.

        Returns:
            ``{success, message, items, pagination}`` for paginated results,
            ``{success, message, data}`` otherwise
        """
        if isinstance(raw, Mapping) and "success" in raw and "message" in raw:
            return dict(raw)

        message = resolve_message(
            self.translator,
            self.message_key(resource, action, OutcomeKey.SUCCESS),
            self.config.graphql_fallback_message,
            lang=lang,
        )

        classified = classify_payload(raw)
        if classified.kind == PayloadKind.PAGINATED:
            logger.debug(f"Paginated result for {resource}.{action}")
            envelope = GraphQLEnvelope(
                success=True,
                message=message,
                items=classified.value["items"],
                pagination=classified.value["pagination"],
            )
        else:
            envelope = GraphQLEnvelope(success=True, message=message, data=raw)

        return envelope.model_dump(exclude_unset=True)
