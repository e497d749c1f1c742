from __future__ import annotations

from typing import Protocol

from pool_tags.domain.entities.pool import RawPoolRecord


class PoolSourcePort(Protocol):
    def fetch_pools(self, *, chain_id: str, api_key: str) -> list[RawPoolRecord]:
        ...
