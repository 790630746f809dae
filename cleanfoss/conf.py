"""
CleanFoss configuration.

Usage in settings.py:
    CLEANFOSS = {
        "CATALOG_BACKEND": "cleanfoss.adapters.static.StaticCatalogBackend",
        "VAT_RATE": "0.25",
        "ADDITIONAL_ITEM_DISCOUNT_RATE": "0.10",
        "MAX_CART_ITEMS": 25,
    }
"""

import importlib
import os
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from django.conf import ENVIRONMENT_VARIABLE, settings


DEFAULT_CATALOG_BACKEND = "cleanfoss.adapters.static.StaticCatalogBackend"


@dataclass
class CleanfossSettings:
    """CleanFoss configuration settings."""

    CATALOG_BACKEND: str = DEFAULT_CATALOG_BACKEND
    VAT_RATE: Decimal = Decimal("0.25")
    ADDITIONAL_ITEM_DISCOUNT_RATE: Decimal = Decimal("0.10")
    MAX_CART_ITEMS: int = 25

    def __post_init__(self):
        self.VAT_RATE = Decimal(str(self.VAT_RATE))
        self.ADDITIONAL_ITEM_DISCOUNT_RATE = Decimal(str(self.ADDITIONAL_ITEM_DISCOUNT_RATE))
        self.MAX_CART_ITEMS = int(self.MAX_CART_ITEMS)


def get_cleanfoss_settings() -> CleanfossSettings:
    """Load settings from Django settings (defaults when Django is not configured)."""
    if not settings.configured and not os.environ.get(ENVIRONMENT_VARIABLE):
        return CleanfossSettings()
    user_settings: dict[str, Any] = getattr(settings, "CLEANFOSS", {})
    return CleanfossSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_cleanfoss_settings(), name)


cleanfoss_settings = _LazySettings()


# CatalogBackend singleton
_catalog_backend_lock = threading.Lock()
_catalog_backend_instance = None


def get_catalog_backend():
    """
    Return the configured CatalogBackend instance.

    Loads from CLEANFOSS["CATALOG_BACKEND"] setting (dotted path).
    If _catalog_backend_instance was set directly (e.g. in tests), returns it as-is.
    """
    global _catalog_backend_instance
    if _catalog_backend_instance is not None:
        return _catalog_backend_instance
    backend_path = cleanfoss_settings.CATALOG_BACKEND or DEFAULT_CATALOG_BACKEND
    with _catalog_backend_lock:
        if _catalog_backend_instance is None:
            module_path, cls_name = backend_path.rsplit(".", 1)
            module = importlib.import_module(module_path)
            cls = getattr(module, cls_name)
            _catalog_backend_instance = cls()
    return _catalog_backend_instance


def reset_catalog_backend():
    """Reset CatalogBackend singleton (for tests)."""
    global _catalog_backend_instance
    _catalog_backend_instance = None
