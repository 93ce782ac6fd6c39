"""Observer implementations for reconciliation checkpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skusync.domain.model import ChangeEvent, FieldError, QuantityAssignment, Sku
    from skusync.domain.ports.observer import ReconciliationObserver

_PREFIX = "[same-sku-sync]"


def _describe(event: ChangeEvent | None) -> str:
    if event is None:
        return "<unparsed event>"
    return f"{event.item_id}@{event.location_id}"


@dataclass(slots=True)
class LoggingObserver:
    """Default sink writing every checkpoint to the standard logging module."""

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("skusync.reconcile"))

    def skipped(self, reason: str, *, event: ChangeEvent | None, sku: Sku | None) -> None:
        self.logger.info("%s Skipped %s (sku=%s): %s", _PREFIX, _describe(event), sku, reason)

    def committing(
        self, event: ChangeEvent, *, sku: Sku, assignments: Sequence[QuantityAssignment]
    ) -> None:
        self.logger.info(
            "%s Applying quantity %d for SKU %r to %d item(s) at %s: %s",
            _PREFIX,
            event.new_quantity,
            sku,
            len(assignments),
            event.location_id,
            ", ".join(assignment.item_id for assignment in assignments),
        )

    def committed(
        self, event: ChangeEvent, *, sku: Sku, assignments: Sequence[QuantityAssignment]
    ) -> None:
        self.logger.info(
            "%s inventorySetQuantities applied for SKU %r (%d item(s), trigger %s)",
            _PREFIX,
            sku,
            len(assignments),
            event.item_id,
        )

    def field_errors(
        self, event: ChangeEvent, *, sku: Sku, errors: Sequence[FieldError]
    ) -> None:
        self.logger.error(
            "%s inventorySetQuantities returned %d error(s) for SKU %r (trigger %s): %s",
            _PREFIX,
            len(errors),
            sku,
            event.item_id,
            "; ".join(str(error) for error in errors),
        )

    def failed(self, exc: Exception, *, event: ChangeEvent | None, sku: Sku | None) -> None:
        self.logger.error(
            "%s Error while syncing same-SKU inventory for %s (sku=%s)",
            _PREFIX,
            _describe(event),
            sku,
            exc_info=exc,
        )


@dataclass(slots=True)
class CompositeObserver:
    """Fan one checkpoint out to several observers in order."""

    observers: tuple[ReconciliationObserver, ...] = ()

    def skipped(self, reason: str, *, event: ChangeEvent | None, sku: Sku | None) -> None:
        for observer in self.observers:
            observer.skipped(reason, event=event, sku=sku)

    def committing(
        self, event: ChangeEvent, *, sku: Sku, assignments: Sequence[QuantityAssignment]
    ) -> None:
        for observer in self.observers:
            observer.committing(event, sku=sku, assignments=assignments)

    def committed(
        self, event: ChangeEvent, *, sku: Sku, assignments: Sequence[QuantityAssignment]
    ) -> None:
        for observer in self.observers:
            observer.committed(event, sku=sku, assignments=assignments)

    def field_errors(
        self, event: ChangeEvent, *, sku: Sku, errors: Sequence[FieldError]
    ) -> None:
        for observer in self.observers:
            observer.field_errors(event, sku=sku, errors=errors)

    def failed(self, exc: Exception, *, event: ChangeEvent | None, sku: Sku | None) -> None:
        for observer in self.observers:
            observer.failed(exc, event=event, sku=sku)
