from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from pool_tags.domain.entities.pool import RawPoolRecord
from pool_tags.domain.exceptions import MalformedResponseError, QueryError, TransportError
from pool_tags.infrastructure.clients.pool_pagination import PaginationStrategy


logger = logging.getLogger(__name__)


GRAPHQL_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class PoolsSubgraphClientSettings:
    timeout_seconds: float
    page_size: int = 1000
    max_pages: int = 10000

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}.")
        if self.max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {self.max_pages}.")


class PoolsSubgraphClient:
    def __init__(
        self,
        settings: PoolsSubgraphClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def fetch_all(self, endpoint: str, *, strategy: PaginationStrategy) -> list[RawPoolRecord]:
        page_size = self._settings.page_size
        cursor = strategy.initial_cursor()
        result: list[RawPoolRecord] = []
        pages = 0

        while True:
            if pages >= self._settings.max_pages:
                raise MalformedResponseError(
                    f"Pagination did not finish after {pages} pages (cursor={cursor})."
                )
            payload = self._post_graphql(
                url=endpoint,
                query=strategy.query,
                variables=strategy.variables(cursor=cursor, page_size=page_size),
            )
            page = self._parse_pools(payload)
            pages += 1
            result.extend(page)
            logger.debug(
                "pools_subgraph_client: fetched_page page=%s size=%s cursor=%s mode=%s",
                pages,
                len(page),
                cursor,
                strategy.name,
            )

            if len(page) < page_size:
                break

            next_cursor = strategy.next_cursor(cursor=cursor, page=page)
            if next_cursor <= cursor:
                raise MalformedResponseError(
                    f"Pagination cursor did not advance past {cursor} on page {pages}."
                )
            cursor = next_cursor

        logger.info(
            "pools_subgraph_client: fetched_pools fetched=%s pages=%s mode=%s",
            len(result),
            pages,
            strategy.name,
        )
        return result

    def _parse_pools(self, payload: dict) -> list[RawPoolRecord]:
        data = payload.get("data")
        rows = data.get("pools") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise MalformedResponseError("Subgraph response is missing data.pools.")

        records: list[RawPoolRecord] = []
        for row in rows:
            if not isinstance(row, dict) or not row.get("id"):
                raise MalformedResponseError(f"Subgraph returned a pool without id: {row!r}")
            raw_created_at = row.get("createdAt")
            try:
                created_at = int(raw_created_at) if raw_created_at is not None else None
            except (TypeError, ValueError) as exc:
                raise MalformedResponseError(
                    f"Invalid createdAt for pool {row['id']}: {raw_created_at!r}"
                ) from exc
            records.append(
                RawPoolRecord(
                    id=str(row["id"]),
                    name=str(row.get("name") or ""),
                    symbol=str(row.get("symbol") or ""),
                    created_at=created_at,
                )
            )
        return records

    def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        try:
            with httpx.Client(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post(
                    url,
                    json={"query": query, "variables": variables},
                    headers=GRAPHQL_HEADERS,
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"Subgraph request failed with HTTP {exc.response.status_code}."
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Subgraph request failed: {exc}") from exc
        except ValueError as exc:
            raise MalformedResponseError("Subgraph response is not valid JSON.") from exc

        if not isinstance(payload, dict):
            raise MalformedResponseError("Subgraph response is not a JSON object.")

        errors = payload.get("errors") or []
        if not isinstance(errors, list):
            errors = [errors]
        if errors:
            messages = [
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            ]
            for message in messages:
                logger.error("pools_subgraph_client: graphql_error message=%s", message)
            raise QueryError(messages)

        return payload
