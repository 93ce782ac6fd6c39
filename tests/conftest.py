from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx
import pytest

from skusync.adapters.http_resilience import ResilientClient
from skusync.config.http_resilience import ResilienceConfig
from skusync.config.shopify import ShopifyConfig
from skusync.domain.model import CatalogItem, FieldError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from skusync.domain.model import ChangeEvent, QuantityAssignment
    from skusync.domain.ports.catalog import QuantityChange

SHOP_BASE_URL = "https://example.myshopify.com/admin/api/2025-01/"


@dataclass(slots=True)
class SetQuantitiesCall:
    location_id: str
    quantities: list[QuantityChange]
    comparison_ignored: bool
    reason: str
    name: str


@dataclass(slots=True)
class FakeCatalog:
    """In-memory catalog recording every call made by the reconciler."""

    skus: dict[str, str | None] = field(default_factory=dict)
    variants: dict[str, list[CatalogItem]] = field(default_factory=dict)
    rejected: set[str] = field(default_factory=set)
    fail_on: str | None = None
    calls: list[str] = field(default_factory=list)
    sibling_requests: list[tuple[str, int, str | None]] = field(default_factory=list)
    mutations: list[SetQuantitiesCall] = field(default_factory=list)

    def _maybe_fail(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_on == name:
            raise httpx.ConnectError(f"{name} unreachable")

    async def resolve_sku(self, item_id: str) -> str | None:
        self._maybe_fail("resolve_sku")
        return self.skus.get(item_id)

    async def find_siblings(
        self,
        sku: str,
        *,
        limit: int,
        location_id: str | None = None,
    ) -> Sequence[CatalogItem]:
        self._maybe_fail("find_siblings")
        self.sibling_requests.append((sku, limit, location_id))
        return list(self.variants.get(sku, []))[:limit]

    async def set_quantities(
        self,
        location_id: str,
        quantities: Sequence[QuantityChange],
        *,
        comparison_ignored: bool,
        reason: str,
        name: str = "available",
    ) -> Sequence[FieldError]:
        self._maybe_fail("set_quantities")
        self.mutations.append(
            SetQuantitiesCall(
                location_id=location_id,
                quantities=list(quantities),
                comparison_ignored=comparison_ignored,
                reason=reason,
                name=name,
            )
        )
        return [
            FieldError(
                message=f"Inventory item {change.item_id} is not stocked at {location_id}",
                field=("input", "quantities", str(index), "locationId"),
                code="ITEM_NOT_STOCKED_AT_LOCATION",
            )
            for index, change in enumerate(quantities)
            if change.item_id in self.rejected
        ]


@dataclass(slots=True)
class RecordingObserver:
    skips: list[str] = field(default_factory=list)
    commits: list[tuple[QuantityAssignment, ...]] = field(default_factory=list)
    errors: list[tuple[FieldError, ...]] = field(default_factory=list)
    failures: list[Exception] = field(default_factory=list)
    announced: int = 0

    def skipped(self, reason: str, *, event: ChangeEvent | None, sku: str | None) -> None:
        self.skips.append(reason)

    def committing(
        self, event: ChangeEvent, *, sku: str, assignments: Sequence[QuantityAssignment]
    ) -> None:
        self.announced += 1

    def committed(
        self, event: ChangeEvent, *, sku: str, assignments: Sequence[QuantityAssignment]
    ) -> None:
        self.commits.append(tuple(assignments))

    def field_errors(self, event: ChangeEvent, *, sku: str, errors: Sequence[FieldError]) -> None:
        self.errors.append(tuple(errors))

    def failed(self, exc: Exception, *, event: ChangeEvent | None, sku: str | None) -> None:
        self.failures.append(exc)


@pytest.fixture
def abc_catalog() -> FakeCatalog:
    """Catalog where I1, I2 and I3 share SKU ``ABC`` and I9 has no SKU."""

    return FakeCatalog(
        skus={"I1": "ABC", "I2": "ABC", "I3": "ABC", "I9": None},
        variants={
            "ABC": [
                CatalogItem(item_id="I1", sku="ABC"),
                CatalogItem(item_id="I2", sku="ABC"),
                CatalogItem(item_id="I3", sku="ABC"),
            ]
        },
    )


@pytest.fixture
def recording_observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def shopify_resilience() -> ResilienceConfig:
    return ResilienceConfig(name="shopify", base_url=SHOP_BASE_URL, retry=None)


@pytest.fixture
def shopify_config(shopify_resilience: ResilienceConfig) -> ShopifyConfig:
    return ShopifyConfig(
        shop_domain="example.myshopify.com",
        access_token="shpat_test",
        api_version="2025-01",
        resilience=shopify_resilience,
    )


@dataclass(slots=True)
class GraphQLServer:
    """Answers GraphQL POSTs from canned responses keyed by operation name."""

    responses: dict[str, object] = field(default_factory=dict)
    requests: list[dict[str, object]] = field(default_factory=list)
    raw_requests: list[httpx.Request] = field(default_factory=list)
    status_code: int = 200

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.raw_requests.append(request)
        body = json.loads(request.content)
        self.requests.append(body)
        query = str(body["query"])
        for operation, response in self.responses.items():
            if f" {operation}(" in query:
                return httpx.Response(self.status_code, json=response)
        return httpx.Response(400, json={"errors": [{"message": "unknown operation"}]})

    def client_factory(self) -> Callable[[ResilienceConfig], ResilientClient]:
        def factory(resilience: ResilienceConfig) -> ResilientClient:
            return ResilientClient(resilience, transport=httpx.MockTransport(self.handle))

        return factory


@pytest.fixture
def graphql_server() -> GraphQLServer:
    return GraphQLServer()


@pytest.fixture
def catalog_factory() -> type[FakeCatalog]:
    return FakeCatalog
