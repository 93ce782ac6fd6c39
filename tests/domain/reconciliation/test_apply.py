from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from skusync.domain.model import CatalogItem, QuantityAssignment
from skusync.domain.reconciliation.apply import build_assignments, commit_assignments
from skusync.domain.reconciliation.policy import ReconciliationPolicy

if TYPE_CHECKING:
    from tests.conftest import FakeCatalog

SIBLINGS = (
    CatalogItem(item_id="I1", sku="ABC", quantity=4),
    CatalogItem(item_id="I2", sku="ABC", quantity=9),
)


def test_build_assignments_share_location_and_quantity() -> None:
    assignments = build_assignments(SIBLINGS, location_id="L1", quantity=9)

    assert assignments == (
        QuantityAssignment(item_id="I1", location_id="L1", quantity=9),
        QuantityAssignment(item_id="I2", location_id="L1", quantity=9),
    )


def test_build_assignments_can_skip_unchanged_items() -> None:
    assignments = build_assignments(
        SIBLINGS, location_id="L1", quantity=9, suppress_unchanged=True
    )

    assert [assignment.item_id for assignment in assignments] == ["I1"]


def test_commit_skips_empty_batch(abc_catalog: FakeCatalog) -> None:
    errors = asyncio.run(commit_assignments(abc_catalog, ()))

    assert errors == ()
    assert abc_catalog.calls == []


def test_commit_uses_policy(abc_catalog: FakeCatalog) -> None:
    policy = ReconciliationPolicy(reason="cycle_count_available", comparison_ignored=False)
    assignments = build_assignments(SIBLINGS, location_id="L1", quantity=2)

    asyncio.run(commit_assignments(abc_catalog, assignments, policy=policy))

    [mutation] = abc_catalog.mutations
    assert mutation.reason == "cycle_count_available"
    assert mutation.comparison_ignored is False


def test_commit_refuses_mixed_locations(abc_catalog: FakeCatalog) -> None:
    assignments = (
        QuantityAssignment(item_id="I1", location_id="L1", quantity=1),
        QuantityAssignment(item_id="I2", location_id="L2", quantity=1),
    )

    with pytest.raises(ValueError, match="several locations"):
        asyncio.run(commit_assignments(abc_catalog, assignments))
    assert abc_catalog.mutations == []
