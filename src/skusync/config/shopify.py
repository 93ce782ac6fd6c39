"""Shopify Admin API configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_SHOPIFY_API_VERSION = "2025-01"
SHOPIFY_GRAPHQL_PATH = "graphql.json"
SHOPIFY_TIMEOUT_SECONDS = 10.0


def admin_base_url(shop_domain: str, api_version: str) -> str:
    domain = shop_domain.strip().removeprefix("https://").removeprefix("http://").rstrip("/")
    return f"https://{domain}/admin/api/{api_version}/"


@dataclass(frozen=True, slots=True)
class ShopifyConfig:
    """Holds Shopify Admin API credentials and transport settings."""

    shop_domain: str
    access_token: str
    api_version: str
    resilience: ResilienceConfig

    @property
    def graphql_url(self) -> str:
        return admin_base_url(self.shop_domain, self.api_version) + SHOPIFY_GRAPHQL_PATH


def get_shopify_config(*, resilience: ResilienceConfig | None = None) -> ShopifyConfig:
    values = require_env_vars(("SHOPIFY_SHOP_DOMAIN", "SHOPIFY_ACCESS_TOKEN"))
    shop_domain = values["SHOPIFY_SHOP_DOMAIN"]
    access_token = values["SHOPIFY_ACCESS_TOKEN"]
    api_version = (os.getenv("SHOPIFY_API_VERSION") or "").strip() or DEFAULT_SHOPIFY_API_VERSION

    return ShopifyConfig(
        shop_domain=shop_domain,
        access_token=access_token,
        api_version=api_version,
        resilience=resilience
        or ResilienceConfig(
            name="shopify",
            base_url=admin_base_url(shop_domain, api_version),
            timeout_seconds=SHOPIFY_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
            retry=RetryPolicy(),
            default_headers={
                "X-Shopify-Access-Token": access_token,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        ),
    )
