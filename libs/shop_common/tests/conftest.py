# libs/shop_common/tests/conftest.py
"""
Shared test configuration and fixtures for the shop_common library.
"""

import sys
from pathlib import Path

import pytest


# Configure Python path for testing
def setup_python_path():
    """Set up Python path so ``libs.shop_common`` imports from the repository root."""
    project_root = Path(__file__).parent.parent.parent.parent.absolute()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


# Set up paths immediately when module is imported
setup_python_path()


@pytest.fixture
def catalogs():
    """Small translation catalogs in the on-disk ``<lang>/<namespace>`` layout."""
    return {
        "en": {
            "common": {
                "product": {
                    "action": {
                        "list": {"success": "Product list retrieved"},
                        "update": {
                            "success": "Product updated",
                            "unchanged": "Product has no changes",
                        },
                    }
                },
                "category": {
                    "action": {"getCategories": {"success": "Categories retrieved"}}
                },
                "greeting": "Hello {name}",
            }
        },
        "vi": {
            "common": {
                "product": {
                    "action": {"list": {"success": "Lấy danh sách thành công"}}
                }
            }
        },
    }


@pytest.fixture
def translator(catalogs):
    from libs.shop_common.i18n import TranslationService

    return TranslationService(catalogs, fallback_language="en")


@pytest.fixture
def response_config():
    from libs.shop_common.config import ResponseConfig

    return ResponseConfig()


@pytest.fixture
def normalizer(translator, response_config):
    from libs.shop_common.normalizer import ResponseNormalizer

    return ResponseNormalizer(translator, response_config)
