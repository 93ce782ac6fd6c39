"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
import json
from logging import getLogger
from typing import TYPE_CHECKING

from skusync.adapters.shopify import ShopifyCatalog, inventory_item_gid, location_gid
from skusync.config import ConfigurationError, get_shopify_config, get_sync_config
from skusync.domain.model import ReconciliationOutcome, ReconciliationState
from skusync.domain.reconciliation import (
    LoggingObserver,
    ReconciliationPolicy,
    SameSkuReconciler,
)

if TYPE_CHECKING:
    from skusync.config import ShopifyConfig
    from skusync.domain.ports import CatalogApi, ReconciliationObserver

INVENTORY_LEVELS_UPDATE = "INVENTORY_LEVELS_UPDATE"

log = getLogger(__name__)


def normalize_topic(topic: str) -> str:
    """Accept both ``INVENTORY_LEVELS_UPDATE`` and ``inventory_levels/update``."""

    return topic.strip().upper().replace("/", "_")


def _dump_payload(payload: object) -> str:
    try:
        return json.dumps(payload, indent=2, sort_keys=True, default=str)
    except (TypeError, ValueError):
        return repr(payload)


def build_reconciler(
    catalog: CatalogApi,
    *,
    policy: ReconciliationPolicy | None = None,
    observer: ReconciliationObserver | None = None,
) -> SameSkuReconciler:
    """Wire the orchestrator for Shopify webhook payloads."""

    return SameSkuReconciler(
        catalog=catalog,
        policy=policy or ReconciliationPolicy.from_config(get_sync_config()),
        observer=observer or LoggingObserver(),
        item_id_format=inventory_item_gid,
        location_id_format=location_gid,
    )


async def handle_inventory_webhook(
    payload: object,
    *,
    topic: str = INVENTORY_LEVELS_UPDATE,
    catalog: CatalogApi | None = None,
    config: ShopifyConfig | None = None,
    policy: ReconciliationPolicy | None = None,
    observer: ReconciliationObserver | None = None,
) -> ReconciliationOutcome:
    """Reconcile one verified webhook delivery.

    Always returns; the caller acknowledges the delivery whatever the outcome.
    """

    log.info("Webhook hit: %s", topic)
    if normalize_topic(topic) != INVENTORY_LEVELS_UPDATE:
        log.info("Ignoring topic %s", topic)
        return ReconciliationOutcome(
            state=ReconciliationState.SKIPPED,
            reason=f"unsupported topic {topic}",
        )
    log.debug("Raw payload: %s", _dump_payload(payload))

    try:
        if catalog is not None:
            return await build_reconciler(catalog, policy=policy, observer=observer).reconcile(
                payload
            )

        active_config = config or get_shopify_config()
        async with ShopifyCatalog(config=active_config) as shopify_catalog:
            reconciler = build_reconciler(shopify_catalog, policy=policy, observer=observer)
            return await reconciler.reconcile(payload)
    except ConfigurationError as exc:
        log.error("Cannot sync same-SKU inventory, Shopify is not configured: %s", exc)  # noqa: TRY400
        return ReconciliationOutcome(state=ReconciliationState.FAILED, reason=str(exc))
    except Exception as exc:
        log.exception("Error while syncing same-SKU inventory")
        return ReconciliationOutcome(
            state=ReconciliationState.FAILED,
            reason=f"{type(exc).__name__}: {exc}",
        )


def reconcile_inventory_webhook(
    payload: object,
    *,
    topic: str = INVENTORY_LEVELS_UPDATE,
    catalog: CatalogApi | None = None,
    config: ShopifyConfig | None = None,
    policy: ReconciliationPolicy | None = None,
    observer: ReconciliationObserver | None = None,
) -> ReconciliationOutcome:
    """Synchronous wrapper around ``handle_inventory_webhook``."""

    return asyncio.run(
        handle_inventory_webhook(
            payload,
            topic=topic,
            catalog=catalog,
            config=config,
            policy=policy,
            observer=observer,
        )
    )
