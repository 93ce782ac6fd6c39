"""Shopify global id helpers."""

from __future__ import annotations

GID_PREFIX = "gid://shopify/"


def to_gid(resource: str, value: str | int) -> str:
    """Return the ``gid://shopify/<resource>/<id>`` form of a legacy id.

    Values already in global id form are returned unchanged.
    """

    text = str(value).strip()
    if text.startswith(GID_PREFIX):
        return text
    return f"{GID_PREFIX}{resource}/{text}"


def inventory_item_gid(value: str | int) -> str:
    return to_gid("InventoryItem", value)


def location_gid(value: str | int) -> str:
    return to_gid("Location", value)


def legacy_id(gid: str) -> str:
    return gid.rsplit("/", 1)[-1]
