import json
import logging

import pytest

from libs.shop_common.config import DEFAULT_LOCALES_DIR
from libs.shop_common.i18n import TranslationService, resolve_language, resolve_message


@pytest.mark.unit
class TestTranslationService:
    def test_translate_nested_key(self, translator):
        assert (
            translator.translate("common.product.action.list.success")
            == "Product list retrieved"
        )

    def test_missing_key_echoes_key(self, translator):
        assert translator.translate("common.missing.key") == "common.missing.key"

    def test_requested_language(self, translator):
        assert (
            translator.translate("common.product.action.list.success", lang="vi")
            == "Lấy danh sách thành công"
        )

    def test_falls_back_to_fallback_language(self, translator):
        assert (
            translator.translate("common.product.action.update.success", lang="vi")
            == "Product updated"
        )

    def test_unknown_language_uses_fallback(self, translator):
        assert (
            translator.translate("common.product.action.list.success", lang="fr")
            == "Product list retrieved"
        )

    def test_args_are_formatted(self, translator):
        assert translator.translate("common.greeting", args={"name": "An"}) == "Hello An"

    def test_missing_args_return_template(self, translator):
        assert translator.translate("common.greeting", args={"other": 1}) == "Hello {name}"

    def test_catalog_is_read_only(self, translator):
        with pytest.raises(TypeError):
            translator._catalogs["en"]["common.new"] = "x"

    def test_from_directory(self, tmp_path, catalogs):
        for lang, namespaces in catalogs.items():
            lang_dir = tmp_path / lang
            lang_dir.mkdir()
            for namespace, messages in namespaces.items():
                (lang_dir / f"{namespace}.json").write_text(
                    json.dumps(messages, ensure_ascii=False), encoding="utf-8"
                )

        service = TranslationService.from_directory(tmp_path)
        assert sorted(service.languages) == ["en", "vi"]
        assert (
            service.translate("common.product.action.list.success", lang="vi")
            == "Lấy danh sách thành công"
        )

    def test_missing_directory_loads_nothing(self, tmp_path):
        service = TranslationService.from_directory(tmp_path / "absent")
        assert list(service.languages) == []
        assert service.translate("common.x") == "common.x"

    def test_packaged_locales(self):
        service = TranslationService.from_directory(DEFAULT_LOCALES_DIR)
        assert {"en", "vi"} <= set(service.languages)
        assert (
            service.translate("common.product.action.list.success", lang="vi")
            == "Lấy danh sách thành công"
        )
        assert (
            service.translate("common.product.action.update.unchanged", lang="en")
            == "Product has no changes"
        )


@pytest.mark.unit
class TestResolveMessage:
    def test_found(self, translator):
        assert (
            resolve_message(translator, "common.product.action.list.success", "fallback")
            == "Product list retrieved"
        )

    def test_missing_key_logs_one_warning(self, translator, caplog):
        with caplog.at_level(logging.WARNING):
            assert resolve_message(translator, "missing.key", "fallback") == "fallback"

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "missing.key" in warnings[0].getMessage()

    def test_language_is_passed_through(self, translator):
        assert (
            resolve_message(
                translator, "common.product.action.list.success", "fallback", lang="vi"
            )
            == "Lấy danh sách thành công"
        )


@pytest.mark.unit
class TestResolveLanguage:
    SUPPORTED = ["en", "vi"]

    def test_missing_header(self):
        assert resolve_language(None, self.SUPPORTED, "en") == "en"
        assert resolve_language("", self.SUPPORTED, "en") == "en"

    def test_region_subtag_is_ignored(self):
        assert resolve_language("vi-VN", self.SUPPORTED, "en") == "vi"

    def test_quality_ordering(self):
        assert resolve_language("en;q=0.5, vi;q=0.9", self.SUPPORTED, "en") == "vi"

    def test_first_supported_wins_on_equal_quality(self):
        assert resolve_language("fr, vi, en", self.SUPPORTED, "en") == "vi"

    def test_unsupported_falls_back(self):
        assert resolve_language("fr-FR, de", self.SUPPORTED, "en") == "en"

    def test_zero_quality_is_not_acceptable(self):
        assert resolve_language("vi;q=0, fr", self.SUPPORTED, "en") == "en"
