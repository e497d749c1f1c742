from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import quote

from pool_tags.domain.exceptions import SubgraphNotConfiguredError, UnsupportedChainError
from pool_tags.infrastructure.clients.pool_pagination import (
    OFFSET_PAGINATION,
    TIMESTAMP_CURSOR_PAGINATION,
    PaginationStrategy,
)
from pool_tags.shared.config import CHAIN_KEYS, Settings, get_settings


API_KEY_PLACEHOLDER = "[api-key]"

_PAGINATION_BY_CHAIN: dict[str, PaginationStrategy] = {
    "1": TIMESTAMP_CURSOR_PAGINATION,
    "10": TIMESTAMP_CURSOR_PAGINATION,
    "56": OFFSET_PAGINATION,
    "137": TIMESTAMP_CURSOR_PAGINATION,
    "250": OFFSET_PAGINATION,
    "8453": TIMESTAMP_CURSOR_PAGINATION,
    "42161": TIMESTAMP_CURSOR_PAGINATION,
    "43114": TIMESTAMP_CURSOR_PAGINATION,
}


@dataclass(frozen=True)
class EndpointTemplate:
    chain_key: str
    url_template: str
    pagination: PaginationStrategy


def _build_url_template(gateway_base: str, subgraph_id: str) -> str:
    if not subgraph_id:
        return ""
    if subgraph_id.startswith("http://") or subgraph_id.startswith("https://"):
        return subgraph_id.rstrip("/")
    base = gateway_base.rstrip("/")
    return f"{base}/{API_KEY_PLACEHOLDER}/subgraphs/id/{subgraph_id}"


def build_endpoint_registry(settings: Settings) -> Mapping[str, EndpointTemplate]:
    registry = {}
    for chain_id, chain_key in CHAIN_KEYS.items():
        subgraph_id = str(settings.graph_subgraph_ids.get(chain_key) or "").strip()
        registry[chain_id] = EndpointTemplate(
            chain_key=chain_key,
            url_template=_build_url_template(settings.graph_gateway_base, subgraph_id),
            pagination=_PAGINATION_BY_CHAIN[chain_id],
        )
    return MappingProxyType(registry)


ENDPOINT_REGISTRY = build_endpoint_registry(get_settings())


def supported_chain_ids(registry: Mapping[str, EndpointTemplate] | None = None) -> tuple[str, ...]:
    return tuple((registry if registry is not None else ENDPOINT_REGISTRY).keys())


def get_endpoint_template(
    chain_id: str,
    registry: Mapping[str, EndpointTemplate] | None = None,
) -> EndpointTemplate:
    registry = registry if registry is not None else ENDPOINT_REGISTRY
    template = registry.get(chain_id)
    if template is None or not chain_id.isdigit():
        raise UnsupportedChainError(chain_id, supported_chain_ids(registry))
    return template


def resolve_endpoint(
    chain_id: str,
    api_key: str,
    registry: Mapping[str, EndpointTemplate] | None = None,
) -> str:
    template = get_endpoint_template(chain_id, registry)
    if not template.url_template:
        raise SubgraphNotConfiguredError(
            f"Missing GRAPH_SUBGRAPH_ID_{template.chain_key.upper()} for chain_id={chain_id}."
        )
    return template.url_template.replace(API_KEY_PLACEHOLDER, quote(api_key, safe=""))
