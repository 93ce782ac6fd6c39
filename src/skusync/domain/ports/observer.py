"""Port for reporting reconciliation checkpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skusync.domain.model import ChangeEvent, FieldError, QuantityAssignment, Sku


class ReconciliationObserver(Protocol):
    """Sink for the structured events emitted by the orchestrator."""

    def skipped(self, reason: str, *, event: ChangeEvent | None, sku: Sku | None) -> None: ...

    def committing(
        self, event: ChangeEvent, *, sku: Sku, assignments: Sequence[QuantityAssignment]
    ) -> None: ...

    def committed(
        self, event: ChangeEvent, *, sku: Sku, assignments: Sequence[QuantityAssignment]
    ) -> None: ...

    def field_errors(
        self, event: ChangeEvent, *, sku: Sku, errors: Sequence[FieldError]
    ) -> None: ...

    def failed(self, exc: Exception, *, event: ChangeEvent | None, sku: Sku | None) -> None: ...
