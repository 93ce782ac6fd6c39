"""Commit policy for quantity reconciliation."""

from __future__ import annotations

from dataclasses import dataclass

from skusync.config.sync import DEFAULT_SIBLING_PAGE_SIZE, SyncConfig

CORRECTION_REASON = "correction"
AVAILABLE_QUANTITY = "available"


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconciliationPolicy:
    """How siblings are queried and how the bulk mutation is issued.

    ``suppress_unchanged`` drops assignments for siblings whose current
    quantity already equals the target. Writes made by a run trigger new
    notifications for the siblings; the guard lets that echo end without a
    second mutation.
    """

    sibling_page_size: int = DEFAULT_SIBLING_PAGE_SIZE
    reason: str = CORRECTION_REASON
    quantity_name: str = AVAILABLE_QUANTITY
    comparison_ignored: bool = True
    suppress_unchanged: bool = False

    @classmethod
    def from_config(cls, config: SyncConfig) -> ReconciliationPolicy:
        return cls(
            sibling_page_size=config.sibling_page_size,
            suppress_unchanged=config.suppress_unchanged,
        )
