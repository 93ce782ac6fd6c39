"""Find every catalog entry that shares a SKU."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from skusync.config.sync import DEFAULT_SIBLING_PAGE_SIZE

from .resolve import clean_sku

if TYPE_CHECKING:
    from collections.abc import Iterable

    from skusync.domain.model import CatalogItem, LocationId, SiblingSet, Sku
    from skusync.domain.ports.catalog import CatalogApi

log = getLogger(__name__)


def select_siblings(sku: Sku, entries: Iterable[CatalogItem]) -> SiblingSet:
    """Drop unusable entries and collapse duplicates, keeping platform order.

    The platform's ``sku:`` search is token based, so an entry reporting a
    different SKU is not a sibling. Entries without a SKU are kept because
    some queries omit it.
    """

    seen: set[str] = set()
    siblings: list[CatalogItem] = []
    for entry in entries:
        if not entry.item_id:
            continue
        entry_sku = clean_sku(entry.sku)
        if entry_sku is not None and entry_sku != sku:
            log.debug("Ignoring %s: SKU %r does not match %r", entry.item_id, entry_sku, sku)
            continue
        if entry.item_id in seen:
            continue
        seen.add(entry.item_id)
        siblings.append(entry)
    return tuple(siblings)


async def locate_siblings(
    catalog: CatalogApi,
    sku: Sku,
    *,
    limit: int = DEFAULT_SIBLING_PAGE_SIZE,
    location_id: LocationId | None = None,
) -> SiblingSet:
    """Query one page of entries sharing ``sku``; groups beyond ``limit`` are cut off."""

    entries = await catalog.find_siblings(sku, limit=limit, location_id=location_id)
    return select_siblings(sku, entries)
