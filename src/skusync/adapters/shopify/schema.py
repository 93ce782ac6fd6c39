"""Pydantic models describing Shopify Admin GraphQL payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ShopifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class GraphQLErrorPayload(ShopifyBaseModel):
    message: str
    path: list[str | int] | None = None
    extensions: dict[str, object] | None = None

    @property
    def code(self) -> str | None:
        if not self.extensions:
            return None
        code = self.extensions.get("code")
        return code if isinstance(code, str) else None


class GraphQLResponse(ShopifyBaseModel):
    data: dict[str, object] | None = None
    errors: list[GraphQLErrorPayload] = Field(default_factory=list[GraphQLErrorPayload])


class InventoryItemPayload(ShopifyBaseModel):
    id: str
    sku: str | None = None


class InventoryItemSkuData(ShopifyBaseModel):
    inventory_item: InventoryItemPayload | None = Field(default=None, alias="inventoryItem")


class InventoryQuantityPayload(ShopifyBaseModel):
    name: str
    quantity: int


class InventoryLevelPayload(ShopifyBaseModel):
    quantities: list[InventoryQuantityPayload] = Field(
        default_factory=list[InventoryQuantityPayload]
    )

    def quantity(self, name: str) -> int | None:
        for entry in self.quantities:
            if entry.name == name:
                return entry.quantity
        return None


class VariantInventoryItemPayload(ShopifyBaseModel):
    id: str | None = None
    inventory_level: InventoryLevelPayload | None = Field(default=None, alias="inventoryLevel")


class ProductVariantPayload(ShopifyBaseModel):
    id: str
    sku: str | None = None
    inventory_item: VariantInventoryItemPayload | None = Field(
        default=None, alias="inventoryItem"
    )


class ProductVariantConnection(ShopifyBaseModel):
    nodes: list[ProductVariantPayload] = Field(default_factory=list[ProductVariantPayload])


class VariantsBySkuData(ShopifyBaseModel):
    product_variants: ProductVariantConnection | None = Field(
        default=None, alias="productVariants"
    )


class UserErrorPayload(ShopifyBaseModel):
    message: str
    field: list[str] | None = None
    code: str | None = None


class InventorySetQuantitiesPayload(ShopifyBaseModel):
    user_errors: list[UserErrorPayload] = Field(
        default_factory=list[UserErrorPayload], alias="userErrors"
    )


class SetInventoryData(ShopifyBaseModel):
    inventory_set_quantities: InventorySetQuantitiesPayload | None = Field(
        default=None, alias="inventorySetQuantities"
    )
