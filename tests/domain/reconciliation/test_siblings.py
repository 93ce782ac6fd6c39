from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from skusync.domain.model import CatalogItem
from skusync.domain.reconciliation.siblings import locate_siblings, select_siblings

if TYPE_CHECKING:
    from tests.conftest import FakeCatalog


def test_select_keeps_platform_order_and_drops_duplicates() -> None:
    entries = [
        CatalogItem(item_id="I3", sku="ABC"),
        CatalogItem(item_id="I1", sku="ABC"),
        CatalogItem(item_id="I3", sku="ABC"),
    ]

    assert [item.item_id for item in select_siblings("ABC", entries)] == ["I3", "I1"]


def test_select_drops_entries_without_item_id() -> None:
    entries = [CatalogItem(item_id="", sku="ABC"), CatalogItem(item_id="I2", sku="ABC")]

    assert [item.item_id for item in select_siblings("ABC", entries)] == ["I2"]


def test_select_drops_entries_reporting_another_sku() -> None:
    entries = [
        CatalogItem(item_id="I1", sku="ABC"),
        CatalogItem(item_id="I2", sku="ABC-2"),
        CatalogItem(item_id="I3", sku=None),
    ]

    assert [item.item_id for item in select_siblings("ABC", entries)] == ["I1", "I3"]


def test_locate_returns_empty_for_unknown_sku(abc_catalog: FakeCatalog) -> None:
    assert asyncio.run(locate_siblings(abc_catalog, "NOPE")) == ()


def test_locate_passes_limit_and_location(abc_catalog: FakeCatalog) -> None:
    siblings = asyncio.run(locate_siblings(abc_catalog, "ABC", limit=2, location_id="L1"))

    assert [item.item_id for item in siblings] == ["I1", "I2"]
    assert abc_catalog.sibling_requests == [("ABC", 2, "L1")]
