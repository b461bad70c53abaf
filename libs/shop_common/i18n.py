# libs/shop_common/i18n.py
"""
Read-only translation catalog and message resolution.

Catalogs are loaded once at startup from ``<locales_dir>/<lang>/<namespace>.json``.
A file ``en/common.json`` containing ``{"product": {"action": {...}}}`` provides
keys such as ``common.product.action.getAll.success``.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .logging import get_logger

logger = get_logger(__name__)


def _flatten(prefix: str, node: Mapping[str, Any], out: Dict[str, str]) -> None:
    for name, value in node.items():
        key = f"{prefix}.{name}" if prefix else name
        if isinstance(value, Mapping):
            _flatten(key, value, out)
        elif isinstance(value, str):
            out[key] = value
        else:
            logger.debug(f"Skipping non-string translation value at '{key}'")


class TranslationService:
    """
    Process-wide translation lookup.

    ``translate`` returns the key itself when no message exists, the same way
    most i18n libraries do; callers that need a fallback use ``resolve_message``.
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, Any]],
        fallback_language: str = "en",
    ):
        flat: Dict[str, Mapping[str, str]] = {}
        for lang, messages in catalogs.items():
            entries: Dict[str, str] = {}
            _flatten("", messages, entries)
            flat[lang] = MappingProxyType(entries)
        self._catalogs = MappingProxyType(flat)
        self.fallback_language = fallback_language

    @classmethod
    def from_directory(
        cls, locales_dir: Union[str, Path], fallback_language: str = "en"
    ) -> "TranslationService":
        """
        Load every ``<lang>/<namespace>.json`` file below ``locales_dir``.

        Args:
            locales_dir: Root directory containing one folder per language
            fallback_language: Language used when a key is missing in the requested one

        Returns:
            TranslationService over the loaded catalogs
        """
        root = Path(locales_dir)
        catalogs: Dict[str, Dict[str, Any]] = {}

        if not root.is_dir():
            logger.error(f"Locales directory '{root}' not found, no translations loaded")
            return cls({}, fallback_language=fallback_language)

        for lang_dir in sorted(p for p in root.iterdir() if p.is_dir()):
            namespaces: Dict[str, Any] = {}
            for path in sorted(lang_dir.glob("*.json")):
                with path.open(encoding="utf-8") as fh:
                    namespaces[path.stem] = json.load(fh)
            catalogs[lang_dir.name] = namespaces

        service = cls(catalogs, fallback_language=fallback_language)
        logger.info(
            f"Loaded translations for {sorted(service.languages)} from '{root}'"
        )
        return service

    @property
    def languages(self) -> Iterable[str]:
        return self._catalogs.keys()

    def _lookup(self, key: str, lang: Optional[str]) -> Optional[str]:
        for candidate in (lang, self.fallback_language):
            if candidate is None:
                continue
            catalog = self._catalogs.get(candidate)
            if catalog is not None and key in catalog:
                return catalog[key]
        return None

    def translate(
        self,
        key: str,
        args: Optional[Mapping[str, Any]] = None,
        lang: Optional[str] = None,
    ) -> str:
        """
        Translate a dotted key.

        Args:
            key: Dotted message key, namespace first
            args: Values for ``{name}`` placeholders
            lang: Requested language; the fallback language is tried next

        Returns:
            The formatted message, or ``key`` when no message exists
        """
        template = self._lookup(key, lang)
        if template is None:
            return key
        if not args:
            return template
        try:
            return template.format_map(args)
        except (KeyError, IndexError, ValueError) as e:
            logger.warning(f"Could not format message '{key}': {e}")
            return template


def resolve_message(
    translator: TranslationService,
    key: str,
    fallback: str,
    lang: Optional[str] = None,
) -> str:
    """
    Resolve a message key, degrading to ``fallback`` when it is missing.

    A missing translation is logged once as a warning and never raised.
    """
    translated = translator.translate(key, lang=lang)
    if not translated or translated == key:
        logger.warning(f'i18n key "{key}" not found. Fallback: "{fallback}"')
        return fallback
    return translated


def resolve_language(
    accept_language: Optional[str],
    supported: Iterable[str],
    default: str,
) -> str:
    """
    Choose a supported language from an Accept-Language header.

    Region subtags are ignored (``vi-VN`` matches ``vi``) and q-values are
    honored. Returns ``default`` when nothing matches.
    """
    if not accept_language:
        return default

    supported = set(supported)
    candidates = []
    for position, part in enumerate(accept_language.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        if not tag:
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        # Stable by header position for equal q-values
        candidates.append((-quality, position, tag.split("-")[0]))

    for neg_quality, _, primary in sorted(candidates):
        if neg_quality < 0 and primary in supported:
            return primary
    return default
