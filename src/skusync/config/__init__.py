"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, env_int, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryablePayloadError, RetryPolicy
from .logging import configure_logging
from .shopify import (
    DEFAULT_SHOPIFY_API_VERSION,
    SHOPIFY_GRAPHQL_PATH,
    ShopifyConfig,
    get_shopify_config,
)
from .sync import DEFAULT_SIBLING_PAGE_SIZE, SyncConfig, get_sync_config

__all__ = [
    "DEFAULT_SHOPIFY_API_VERSION",
    "DEFAULT_SIBLING_PAGE_SIZE",
    "SHOPIFY_GRAPHQL_PATH",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "RetryablePayloadError",
    "ShopifyConfig",
    "SyncConfig",
    "configure_logging",
    "env_flag",
    "env_int",
    "get_shopify_config",
    "get_sync_config",
    "require_env_vars",
]
