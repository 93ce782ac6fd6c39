"""Same-SKU inventory reconciliation core.

Stages, in the order the orchestrator runs them:
1) normalize the webhook payload
2) resolve the trigger item's SKU
3) locate siblings sharing the SKU
4) commit one bulk quantity mutation
"""

from __future__ import annotations

from .apply import build_assignments, commit_assignments
from .engine import SameSkuReconciler
from .normalize import normalize_event
from .observers import CompositeObserver, LoggingObserver
from .policy import ReconciliationPolicy
from .resolve import resolve_sku
from .siblings import locate_siblings, select_siblings

__all__ = [
    "CompositeObserver",
    "LoggingObserver",
    "ReconciliationPolicy",
    "SameSkuReconciler",
    "build_assignments",
    "commit_assignments",
    "locate_siblings",
    "normalize_event",
    "resolve_sku",
    "select_siblings",
]
