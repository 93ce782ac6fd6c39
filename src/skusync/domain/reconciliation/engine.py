"""Orchestrator for same-SKU inventory reconciliation.

One call handles one notification:

1) normalize the raw payload into a ``ChangeEvent``
2) resolve the trigger item's SKU
3) locate every sibling sharing that SKU
4) commit the event's quantity to all siblings at the event location

Each stage may end the run early with ``SKIPPED``. Any exception raised by
the catalog is absorbed here and reported as ``FAILED``. Observer errors are
logged and never change the outcome. The caller always gets an outcome back
and must acknowledge the delivery regardless.

Runs keep no state between calls. Two concurrent runs for the same SKU are
not serialized, so the last mutation to land wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from skusync.domain.model import (
    ChangeEvent,
    ReconciliationOutcome,
    ReconciliationState,
    Rejected,
)

from .apply import build_assignments, commit_assignments
from .normalize import IdentifierFormat, keep_identifier, normalize_event
from .observers import LoggingObserver
from .policy import ReconciliationPolicy
from .resolve import resolve_sku
from .siblings import locate_siblings

if TYPE_CHECKING:
    from collections.abc import Callable

    from skusync.domain.model import Sku
    from skusync.domain.ports.catalog import CatalogApi
    from skusync.domain.ports.observer import ReconciliationObserver

log = getLogger(__name__)


@dataclass(slots=True)
class SameSkuReconciler:
    """Propagate one observed quantity to every item sharing its SKU."""

    catalog: CatalogApi
    policy: ReconciliationPolicy = field(default_factory=ReconciliationPolicy)
    observer: ReconciliationObserver = field(default_factory=LoggingObserver)
    item_id_format: IdentifierFormat = keep_identifier
    location_id_format: IdentifierFormat = keep_identifier

    async def reconcile(self, payload: object) -> ReconciliationOutcome:
        """Run every stage for ``payload``; never raises past this boundary."""

        try:
            normalized = normalize_event(
                payload,
                item_id_format=self.item_id_format,
                location_id_format=self.location_id_format,
            )
        except Exception as exc:  # noqa: BLE001
            return self._fail(exc, event=None, sku=None, reached=None)
        if isinstance(normalized, Rejected):
            return self._skip(normalized.reason, event=None, sku=None, reached=None)
        return await self.reconcile_event(normalized)

    async def reconcile_event(self, event: ChangeEvent) -> ReconciliationOutcome:
        """Run the catalog stages for an already validated ``event``."""

        sku: Sku | None = None
        reached = ReconciliationState.NORMALIZED
        try:
            sku = await resolve_sku(self.catalog, event.item_id)
            if sku is None:
                return self._skip(
                    "no SKU for inventory item", event=event, sku=None, reached=reached
                )
            reached = ReconciliationState.SKU_RESOLVED

            location = event.location_id if self.policy.suppress_unchanged else None
            siblings = await locate_siblings(
                self.catalog,
                sku,
                limit=self.policy.sibling_page_size,
                location_id=location,
            )
            if not siblings:
                return self._skip(
                    "no variants found for SKU", event=event, sku=sku, reached=reached
                )
            reached = ReconciliationState.SIBLINGS_FOUND

            assignments = build_assignments(
                siblings,
                location_id=event.location_id,
                quantity=event.new_quantity,
                suppress_unchanged=self.policy.suppress_unchanged,
            )
            if not assignments:
                return self._skip("already in sync", event=event, sku=sku, reached=reached)

            self._notify(
                "committing",
                lambda: self.observer.committing(event, sku=sku, assignments=assignments),
            )
            errors = await commit_assignments(self.catalog, assignments, policy=self.policy)
        except Exception as exc:  # noqa: BLE001
            return self._fail(exc, event=event, sku=sku, reached=reached)

        if errors:
            self._notify(
                "field_errors",
                lambda: self.observer.field_errors(event, sku=sku, errors=errors),
            )
        else:
            self._notify(
                "committed",
                lambda: self.observer.committed(event, sku=sku, assignments=assignments),
            )
        return ReconciliationOutcome(
            state=ReconciliationState.COMMITTED,
            reached=ReconciliationState.SIBLINGS_FOUND,
            event=event,
            sku=sku,
            assignments=assignments,
            errors=errors,
        )

    def _notify(self, checkpoint: str, call: Callable[[], None]) -> None:
        """Invoke one observer checkpoint; a failing sink never ends the run."""

        try:
            call()
        except Exception:
            log.exception("Observer failed at checkpoint %s", checkpoint)

    def _skip(
        self,
        reason: str,
        *,
        event: ChangeEvent | None,
        sku: Sku | None,
        reached: ReconciliationState | None,
    ) -> ReconciliationOutcome:
        self._notify("skipped", lambda: self.observer.skipped(reason, event=event, sku=sku))
        return ReconciliationOutcome(
            state=ReconciliationState.SKIPPED,
            reached=reached,
            reason=reason,
            event=event,
            sku=sku,
        )

    def _fail(
        self,
        exc: Exception,
        *,
        event: ChangeEvent | None,
        sku: Sku | None,
        reached: ReconciliationState | None,
    ) -> ReconciliationOutcome:
        self._notify("failed", lambda: self.observer.failed(exc, event=event, sku=sku))
        return ReconciliationOutcome(
            state=ReconciliationState.FAILED,
            reached=reached,
            reason=f"{type(exc).__name__}: {exc}",
            event=event,
            sku=sku,
        )
