"""Port for querying and mutating the commerce platform's inventory catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skusync.domain.model import CatalogItem, FieldError, ItemId, LocationId, Sku


@dataclass(frozen=True, slots=True)
class QuantityChange:
    """One item's target quantity inside a bulk ``set_quantities`` call."""

    item_id: ItemId
    quantity: int


@runtime_checkable
class CatalogApi(Protocol):
    """Async catalog capability injected into the reconciler."""

    async def resolve_sku(self, item_id: ItemId) -> Sku | None: ...

    async def find_siblings(
        self,
        sku: Sku,
        *,
        limit: int,
        location_id: LocationId | None = None,
    ) -> Sequence[CatalogItem]: ...

    async def set_quantities(
        self,
        location_id: LocationId,
        quantities: Sequence[QuantityChange],
        *,
        comparison_ignored: bool,
        reason: str,
        name: str = "available",
    ) -> Sequence[FieldError]: ...


__all__ = ["CatalogApi", "QuantityChange"]
