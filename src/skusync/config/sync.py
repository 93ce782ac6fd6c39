"""Reconciliation defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag, env_int

DEFAULT_SIBLING_PAGE_SIZE = 50
MAX_SIBLING_PAGE_SIZE = 250


@dataclass(frozen=True, slots=True)
class SyncConfig:
    sibling_page_size: int = DEFAULT_SIBLING_PAGE_SIZE
    suppress_unchanged: bool = False


def get_sync_config() -> SyncConfig:
    return SyncConfig(
        sibling_page_size=env_int(
            "SKUSYNC_SIBLING_PAGE_SIZE",
            default=DEFAULT_SIBLING_PAGE_SIZE,
            minimum=1,
            maximum=MAX_SIBLING_PAGE_SIZE,
        ),
        suppress_unchanged=env_flag("SKUSYNC_SUPPRESS_UNCHANGED"),
    )
