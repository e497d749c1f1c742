from __future__ import annotations

from collections.abc import Mapping

from pool_tags.domain.entities.pool import RawPoolRecord
from pool_tags.infrastructure.clients.endpoint_registry import (
    EndpointTemplate,
    get_endpoint_template,
    resolve_endpoint,
)
from pool_tags.infrastructure.clients.pools_subgraph_client import PoolsSubgraphClient


class SubgraphPoolSource:
    def __init__(
        self,
        client: PoolsSubgraphClient,
        *,
        registry: Mapping[str, EndpointTemplate] | None = None,
    ):
        self._client = client
        self._registry = registry

    def fetch_pools(self, *, chain_id: str, api_key: str) -> list[RawPoolRecord]:
        endpoint = resolve_endpoint(chain_id, api_key, self._registry)
        strategy = get_endpoint_template(chain_id, self._registry).pagination
        return self._client.fetch_all(endpoint, strategy=strategy)
