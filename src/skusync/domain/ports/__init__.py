"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import CatalogApi, QuantityChange
from .observer import ReconciliationObserver

__all__ = [
    "CatalogApi",
    "QuantityChange",
    "ReconciliationObserver",
]
