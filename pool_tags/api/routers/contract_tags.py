from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pool_tags.api.deps import get_graph_api_key, get_return_tags_use_case
from pool_tags.api.schemas.contract_tags import ContractTagResponse, SupportedChainsResponse
from pool_tags.application.dto.contract_tags import ReturnTagsInput
from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.domain.exceptions import ReturnTagsError, SubgraphNotConfiguredError, UnsupportedChainError
from pool_tags.infrastructure.clients.endpoint_registry import supported_chain_ids

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/v1/contract-tags/chains", response_model=SupportedChainsResponse)
def list_supported_chains():
    return SupportedChainsResponse(chain_ids=list(supported_chain_ids()))


@router.get(
    "/v1/contract-tags/{chain_id}",
    response_model=list[ContractTagResponse],
    response_model_by_alias=True,
)
def get_contract_tags(
    chain_id: str,
    api_key: str = Depends(get_graph_api_key),
    use_case: ReturnTagsUseCase = Depends(get_return_tags_use_case),
):
    try:
        output = use_case.execute(ReturnTagsInput(chain_id=chain_id, api_key=api_key))
    except ReturnTagsError as exc:
        if isinstance(exc.cause, UnsupportedChainError):
            raise HTTPException(status_code=400, detail=str(exc.cause)) from exc
        if isinstance(exc.cause, SubgraphNotConfiguredError):
            raise HTTPException(status_code=500, detail=str(exc.cause)) from exc
        logger.warning("contract_tags_router: upstream_failed chain_id=%s error=%s", chain_id, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return [ContractTagResponse(**tag.to_registry_dict()) for tag in output.tags]
