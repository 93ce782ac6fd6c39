"""Resolve the SKU of the item that triggered a change."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skusync.domain.model import ItemId, Sku
    from skusync.domain.ports.catalog import CatalogApi


def clean_sku(value: str | None) -> Sku | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


async def resolve_sku(catalog: CatalogApi, item_id: ItemId) -> Sku | None:
    """Look up ``item_id`` once; ``None`` means the item has no usable SKU."""

    return clean_sku(await catalog.resolve_sku(item_id))
