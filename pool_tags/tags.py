from __future__ import annotations

from pool_tags.application.dto.contract_tags import ReturnTagsInput
from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.infrastructure.clients.endpoint_registry import build_endpoint_registry
from pool_tags.infrastructure.clients.pools_subgraph_client import (
    PoolsSubgraphClient,
    PoolsSubgraphClientSettings,
)
from pool_tags.infrastructure.clients.subgraph_pool_source import SubgraphPoolSource
from pool_tags.shared.config import Settings, get_settings


def build_return_tags_use_case(settings: Settings) -> ReturnTagsUseCase:
    client = PoolsSubgraphClient(
        PoolsSubgraphClientSettings(
            timeout_seconds=settings.graph_request_timeout_seconds,
            page_size=settings.graph_page_size,
            max_pages=settings.graph_max_pages,
        )
    )
    return ReturnTagsUseCase(
        pool_source=SubgraphPoolSource(client, registry=build_endpoint_registry(settings)),
    )


def return_tags(chain_id: str, api_key: str, *, settings: Settings | None = None) -> list[ContractTag]:
    """Fetch every pool of ``chain_id`` and return its contract tags.

    Raises ``ReturnTagsError`` wrapping the underlying failure; no partial list
    is ever returned.
    """
    use_case = build_return_tags_use_case(settings or get_settings())
    output = use_case.execute(ReturnTagsInput(chain_id=chain_id, api_key=api_key))
    return output.tags
