from __future__ import annotations

import logging

from pool_tags.application.dto.contract_tags import ReturnTagsInput, ReturnTagsOutput
from pool_tags.application.ports.pool_source_port import PoolSourcePort
from pool_tags.domain.exceptions import ContractTagsError, ReturnTagsError
from pool_tags.domain.services.tag_transform import transform_pools


logger = logging.getLogger(__name__)


class ReturnTagsUseCase:
    def __init__(self, *, pool_source: PoolSourcePort):
        self._pool_source = pool_source

    def execute(self, command: ReturnTagsInput) -> ReturnTagsOutput:
        try:
            pools = self._pool_source.fetch_pools(
                chain_id=command.chain_id,
                api_key=command.api_key,
            )
        except ContractTagsError as exc:
            logger.warning(
                "return_tags: fetch_failed chain_id=%s error_type=%s error=%s",
                command.chain_id,
                type(exc).__name__,
                exc,
            )
            raise ReturnTagsError(command.chain_id, exc) from exc

        tags = transform_pools(command.chain_id, pools)
        return ReturnTagsOutput(chain_id=command.chain_id, tags=tags)