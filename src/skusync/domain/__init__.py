"""Domain layer for same-SKU inventory reconciliation."""
