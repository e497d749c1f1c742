from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


CHAIN_KEYS = {
    "1": "ethereum",
    "10": "optimism",
    "56": "bsc",
    "137": "polygon",
    "250": "fantom",
    "8453": "base",
    "42161": "arbitrum",
    "43114": "avalanche",
}


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _positive_int(name: str, default: str) -> int:
    value = int(_env(name, default))
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}.")
    return value


@dataclass(frozen=True)
class Settings:
    graph_api_key: str
    graph_gateway_base: str
    graph_subgraph_ids: dict
    graph_request_timeout_seconds: float
    graph_page_size: int
    graph_max_pages: int
    log_level: str


def get_settings() -> Settings:
    subgraphs = {
        chain_key: _env(f"GRAPH_SUBGRAPH_ID_{chain_key.upper()}", "")
        for chain_key in CHAIN_KEYS.values()
    }
    return Settings(
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_gateway_base=_env("GRAPH_GATEWAY_BASE", "https://gateway.thegraph.com/api"),
        graph_subgraph_ids=subgraphs,
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "30")),
        graph_page_size=_positive_int("GRAPH_PAGE_SIZE", "1000"),
        graph_max_pages=_positive_int("GRAPH_MAX_PAGES", "10000"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
