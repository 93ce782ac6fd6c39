"""Build and commit the per-sibling quantity assignments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skusync.domain.model import QuantityAssignment
from skusync.domain.ports.catalog import QuantityChange

from .policy import ReconciliationPolicy

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skusync.domain.model import FieldError, LocationId, SiblingSet
    from skusync.domain.ports.catalog import CatalogApi


def build_assignments(
    siblings: SiblingSet,
    *,
    location_id: LocationId,
    quantity: int,
    suppress_unchanged: bool = False,
) -> tuple[QuantityAssignment, ...]:
    """Mirror one location/quantity pair onto every sibling, trigger included."""

    return tuple(
        QuantityAssignment(item_id=sibling.item_id, location_id=location_id, quantity=quantity)
        for sibling in siblings
        if not (suppress_unchanged and sibling.quantity == quantity)
    )


async def commit_assignments(
    catalog: CatalogApi,
    assignments: Sequence[QuantityAssignment],
    *,
    policy: ReconciliationPolicy | None = None,
) -> tuple[FieldError, ...]:
    """Submit ``assignments`` as one bulk mutation and return field-level errors.

    Nothing is sent for an empty batch. Rejected assignments are reported,
    not retried, and accepted ones are not rolled back.
    """

    if not assignments:
        return ()
    locations = {assignment.location_id for assignment in assignments}
    if len(locations) != 1:
        raise ValueError(f"Assignments span several locations: {sorted(locations)}")

    active_policy = policy or ReconciliationPolicy()
    errors = await catalog.set_quantities(
        assignments[0].location_id,
        [QuantityChange(item_id=a.item_id, quantity=a.quantity) for a in assignments],
        comparison_ignored=active_policy.comparison_ignored,
        reason=active_policy.reason,
        name=active_policy.quantity_name,
    )
    return tuple(errors)
