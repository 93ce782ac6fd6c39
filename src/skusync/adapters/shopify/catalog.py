"""Shopify implementation of the catalog port."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from skusync.domain.model import CatalogItem, FieldError

from .client import ShopifyAPIError, ShopifyGraphQLClient
from .queries import (
    INVENTORY_ITEM_SKU,
    SET_INVENTORY_QUANTITIES,
    VARIANTS_BY_SKU,
    VARIANTS_BY_SKU_WITH_LEVELS,
    sku_search_query,
)
from .schema import (
    InventoryItemSkuData,
    ProductVariantPayload,
    SetInventoryData,
    VariantsBySkuData,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import TracebackType

    from skusync.adapters.http_resilience import ResilientClient
    from skusync.config.http_resilience import ResilienceConfig
    from skusync.config.shopify import ShopifyConfig
    from skusync.domain.ports.catalog import QuantityChange

log = getLogger(__name__)

AVAILABLE = "available"


def _catalog_item(variant: ProductVariantPayload) -> CatalogItem | None:
    inventory_item = variant.inventory_item
    if inventory_item is None or not inventory_item.id:
        return None
    level = inventory_item.inventory_level
    return CatalogItem(
        item_id=inventory_item.id,
        sku=variant.sku,
        quantity=level.quantity(AVAILABLE) if level is not None else None,
    )


class ShopifyCatalog:
    """Resolve SKUs, list variants and set quantities through the Admin API."""

    def __init__(
        self,
        *,
        config: ShopifyConfig,
        client: ShopifyGraphQLClient | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._client = client or ShopifyGraphQLClient(
            config=config, client_factory=client_factory
        )

    async def __aenter__(self) -> ShopifyCatalog:
        await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self._client.__aexit__(exc_type, exc, tb)

    async def resolve_sku(self, item_id: str) -> str | None:
        data = await self._client.execute(INVENTORY_ITEM_SKU, {"id": item_id})
        parsed = InventoryItemSkuData.model_validate(data)
        if parsed.inventory_item is None:
            log.info("Inventory item %s not found", item_id)
            return None
        return parsed.inventory_item.sku

    async def find_siblings(
        self,
        sku: str,
        *,
        limit: int,
        location_id: str | None = None,
    ) -> Sequence[CatalogItem]:
        variables: dict[str, object] = {"query": sku_search_query(sku), "first": limit}
        if location_id is None:
            document = VARIANTS_BY_SKU
        else:
            document = VARIANTS_BY_SKU_WITH_LEVELS
            variables["locationId"] = location_id

        data = await self._client.execute(document, variables)
        connection = VariantsBySkuData.model_validate(data).product_variants
        if connection is None:
            return []
        if len(connection.nodes) >= limit:
            log.warning("Variant query for SKU %r hit the page limit of %d", sku, limit)

        items: list[CatalogItem] = []
        for variant in connection.nodes:
            item = _catalog_item(variant)
            if item is None:
                log.debug("Variant %s has no inventory item", variant.id)
                continue
            items.append(item)
        return items

    async def set_quantities(
        self,
        location_id: str,
        quantities: Sequence[QuantityChange],
        *,
        comparison_ignored: bool,
        reason: str,
        name: str = AVAILABLE,
    ) -> Sequence[FieldError]:
        payload = {
            "name": name,
            "reason": reason,
            "ignoreCompareQuantity": comparison_ignored,
            "quantities": [
                {
                    "inventoryItemId": change.item_id,
                    "locationId": location_id,
                    "quantity": change.quantity,
                }
                for change in quantities
            ],
        }
        data = await self._client.execute(SET_INVENTORY_QUANTITIES, {"input": payload})
        result = SetInventoryData.model_validate(data).inventory_set_quantities
        if result is None:
            raise ShopifyAPIError("inventorySetQuantities returned no payload")
        return [
            FieldError(
                message=error.message,
                field=tuple(error.field or ()),
                code=error.code,
            )
            for error in result.user_errors
        ]
