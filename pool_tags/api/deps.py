from __future__ import annotations

from fastapi import Header, HTTPException

from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.shared.config import get_settings
from pool_tags.tags import build_return_tags_use_case


def get_return_tags_use_case() -> ReturnTagsUseCase:
    return build_return_tags_use_case(get_settings())


def get_graph_api_key(x_graph_api_key: str | None = Header(default=None)) -> str:
    api_key = (x_graph_api_key or "").strip() or get_settings().graph_api_key.strip()
    if not api_key:
        raise HTTPException(status_code=401, detail="X-Graph-Api-Key header or GRAPH_API_KEY is required.")
    return api_key
