"""HTTP client for the Shopify Admin GraphQL API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from skusync.adapters.http_resilience import ResilientClient
from skusync.config.shopify import SHOPIFY_GRAPHQL_PATH

from .schema import GraphQLErrorPayload, GraphQLResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType

    from skusync.config.http_resilience import ResilienceConfig
    from skusync.config.shopify import ShopifyConfig

log = getLogger(__name__)


class ShopifyAPIError(RuntimeError):
    """Raised when the Admin API answers with top-level GraphQL errors or no data."""

    def __init__(
        self,
        message: str,
        *,
        errors: tuple[GraphQLErrorPayload, ...] = (),
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors
        self.status_code = status_code

    @property
    def throttled(self) -> bool:
        return any(error.code == "THROTTLED" for error in self.errors)


class ShopifyGraphQLClient:
    """Low-level GraphQL client bound to one shop.

    Used as an async context manager it keeps one HTTP client (and its rate
    limiter) open for every request of a reconciliation run. Outside a
    context each request opens and closes its own client.
    """

    def __init__(
        self,
        *,
        config: ShopifyConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None

    async def __aenter__(self) -> ShopifyGraphQLClient:
        if self._client is None:
            self._client = self._client_factory(self._resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            client, self._client = self._client, None
            await client.aclose()

    async def execute(
        self,
        query: str,
        variables: Mapping[str, object] | None = None,
    ) -> dict[str, object]:
        """Run ``query`` and return its ``data`` object."""

        if self._client is not None:
            return await self._perform_request(
                client=self._client, query=query, variables=variables
            )
        async with self._client_factory(self._resilience) as client:
            return await self._perform_request(client=client, query=query, variables=variables)

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        query: str,
        variables: Mapping[str, object] | None,
    ) -> dict[str, object]:
        if self._resilience.base_url is None:
            raise ShopifyAPIError("Missing Shopify base_url in resilience configuration")

        body: dict[str, object] = {"query": query}
        if variables:
            body["variables"] = dict(variables)

        response = await client.post(SHOPIFY_GRAPHQL_PATH, json=body)
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise ShopifyAPIError(
                "Unexpected Shopify response payload", status_code=response.status_code
            )

        parsed = GraphQLResponse.model_validate(payload)
        if parsed.errors:
            messages = "; ".join(error.message for error in parsed.errors)
            log.error(f"Shopify GraphQL error: {messages}")
            raise ShopifyAPIError(
                messages,
                errors=tuple(parsed.errors),
                status_code=response.status_code,
            )
        if parsed.data is None:
            raise ShopifyAPIError(
                "Shopify response carried no data", status_code=response.status_code
            )
        return parsed.data
