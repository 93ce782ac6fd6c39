from __future__ import annotations

import pytest

from skusync.config import (
    ConfigurationError,
    MissingConfigurationError,
    env_flag,
    env_int,
    get_shopify_config,
    get_sync_config,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)
    monkeypatch.setenv("BLANK_VAR", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR", "BLANK_VAR"])

    assert "BLANK_VAR, MISSING_VAR" in str(exc.value)


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("Yes", True), ("off", False)])
def test_env_flag_parses_switches(
    monkeypatch: pytest.MonkeyPatch, raw: str, *, expected: bool
) -> None:
    monkeypatch.setenv("FLAG", raw)

    assert env_flag("FLAG") is expected


def test_env_flag_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLAG", "maybe")

    with pytest.raises(ConfigurationError):
        env_flag("FLAG")


def test_env_int_enforces_bounds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGE", "0")

    with pytest.raises(ConfigurationError, match=">= 1"):
        env_int("PAGE", default=50, minimum=1)


def test_sync_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SKUSYNC_SIBLING_PAGE_SIZE", raising=False)
    monkeypatch.delenv("SKUSYNC_SUPPRESS_UNCHANGED", raising=False)

    config = get_sync_config()

    assert config.sibling_page_size == 50
    assert config.suppress_unchanged is False


def test_sync_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKUSYNC_SIBLING_PAGE_SIZE", "100")
    monkeypatch.setenv("SKUSYNC_SUPPRESS_UNCHANGED", "true")

    config = get_sync_config()

    assert config.sibling_page_size == 100
    assert config.suppress_unchanged is True


def test_shopify_config_requires_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOPIFY_SHOP_DOMAIN", "example.myshopify.com")
    monkeypatch.delenv("SHOPIFY_ACCESS_TOKEN", raising=False)

    with pytest.raises(MissingConfigurationError, match="SHOPIFY_ACCESS_TOKEN"):
        get_shopify_config()


def test_shopify_config_builds_resilience(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOPIFY_SHOP_DOMAIN", "example.myshopify.com")
    monkeypatch.setenv("SHOPIFY_ACCESS_TOKEN", "shpat_test")
    monkeypatch.setenv("SHOPIFY_API_VERSION", "2024-10")

    config = get_shopify_config()

    assert config.resilience.base_url == "https://example.myshopify.com/admin/api/2024-10/"
    assert config.resilience.default_headers is not None
    assert config.resilience.default_headers["X-Shopify-Access-Token"] == "shpat_test"
    assert config.resilience.ratelimit is not None
