"""GraphQL documents for the Shopify Admin API."""

from __future__ import annotations

INVENTORY_ITEM_SKU = """
query GetInventoryItemSku($id: ID!) {
  inventoryItem(id: $id) {
    id
    sku
  }
}
"""

VARIANTS_BY_SKU = """
query VariantsBySku($query: String!, $first: Int!) {
  productVariants(first: $first, query: $query) {
    nodes {
      id
      sku
      inventoryItem {
        id
      }
    }
  }
}
"""

VARIANTS_BY_SKU_WITH_LEVELS = """
query VariantsBySkuWithLevels($query: String!, $first: Int!, $locationId: ID!) {
  productVariants(first: $first, query: $query) {
    nodes {
      id
      sku
      inventoryItem {
        id
        inventoryLevel(locationId: $locationId) {
          quantities(names: ["available"]) {
            name
            quantity
          }
        }
      }
    }
  }
}
"""

SET_INVENTORY_QUANTITIES = """
mutation SetInventory($input: InventorySetQuantitiesInput!) {
  inventorySetQuantities(input: $input) {
    userErrors {
      field
      message
      code
    }
  }
}
"""


def sku_search_query(sku: str) -> str:
    escaped = sku.replace("\\", "\\\\").replace('"', '\\"')
    return f'sku:"{escaped}"'
