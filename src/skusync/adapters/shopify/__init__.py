"""Public interface for the Shopify adapter."""

from __future__ import annotations

from .catalog import ShopifyCatalog
from .client import ShopifyAPIError, ShopifyGraphQLClient
from .ids import inventory_item_gid, legacy_id, location_gid, to_gid

__all__ = [
    "ShopifyAPIError",
    "ShopifyCatalog",
    "ShopifyGraphQLClient",
    "inventory_item_gid",
    "legacy_id",
    "location_gid",
    "to_gid",
]
