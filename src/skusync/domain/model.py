"""Transient entities exchanged during one reconciliation run.

Nothing here is persisted: every object is built from one webhook delivery
and discarded once the run reaches a terminal state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

type ItemId = str
type LocationId = str
type Sku = str


@dataclass(frozen=True, slots=True, kw_only=True)
class ChangeEvent:
    """Validated inventory-level change for one item at one location."""

    item_id: ItemId
    location_id: LocationId
    new_quantity: int


@dataclass(frozen=True, slots=True)
class Rejected:
    """Normalizer verdict for a payload that cannot be reconciled."""

    reason: str


type NormalizedEvent = ChangeEvent | Rejected


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogItem:
    """Platform-side inventory record for one product variant.

    ``quantity`` is the available quantity at the event location and is only
    populated when the catalog was asked for it.
    """

    item_id: ItemId
    sku: Sku | None = None
    quantity: int | None = None


type SiblingSet = tuple[CatalogItem, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class QuantityAssignment:
    item_id: ItemId
    location_id: LocationId
    quantity: int


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldError:
    """Field-level user error returned by the quantity mutation."""

    message: str
    field: tuple[str, ...] = ()
    code: str | None = None

    def __str__(self) -> str:
        path = ".".join(self.field) if self.field else "<input>"
        return f"{path}: {self.message}"


class ReconciliationState(StrEnum):
    NORMALIZED = "normalized"
    SKU_RESOLVED = "sku_resolved"
    SIBLINGS_FOUND = "siblings_found"
    COMMITTED = "committed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(slots=True, kw_only=True)
class ReconciliationOutcome:
    """Diagnostic summary of one run; never used to decide the acknowledgment.

    ``state`` is the terminal state. ``reached`` is the last stage completed
    before it, or ``None`` when the payload never normalized.
    """

    state: ReconciliationState
    reached: ReconciliationState | None = None
    reason: str | None = None
    event: ChangeEvent | None = None
    sku: Sku | None = None
    assignments: tuple[QuantityAssignment, ...] = ()
    errors: tuple[FieldError, ...] = ()
