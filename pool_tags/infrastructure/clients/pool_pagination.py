from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pool_tags.domain.entities.pool import RawPoolRecord


class PaginationStrategy(Protocol):
    name: str
    query: str

    def initial_cursor(self) -> int:
        ...

    def variables(self, *, cursor: int, page_size: int) -> dict:
        ...

    def next_cursor(self, *, cursor: int, page: list[RawPoolRecord]) -> int:
        ...


@dataclass(frozen=True)
class OffsetPagination:
    """``first``/``skip`` paging; every run re-reads the whole collection."""

    name: str = "offset"
    query: str = """
    query Pools($first: Int!, $skip: Int!) {
      pools(first: $first, skip: $skip, orderBy: createdAt, orderDirection: asc) {
        id
        name
        symbol
      }
    }
    """

    def initial_cursor(self) -> int:
        return 0

    def variables(self, *, cursor: int, page_size: int) -> dict:
        return {"first": page_size, "skip": cursor}

    def next_cursor(self, *, cursor: int, page: list[RawPoolRecord]) -> int:
        return cursor + len(page)


@dataclass(frozen=True)
class TimestampCursorPagination:
    """Keyset paging on ``createdAt``.

    The filter is strictly greater-than, so pools sharing the boundary
    timestamp with the last record of a full page are not returned.
    """

    name: str = "timestamp_cursor"
    query: str = """
    query Pools($first: Int!, $lastCreatedAt: Int!) {
      pools(
        first: $first,
        orderBy: createdAt,
        orderDirection: asc,
        where: { createdAt_gt: $lastCreatedAt }
      ) {
        id
        name
        symbol
        createdAt
      }
    }
    """

    def initial_cursor(self) -> int:
        return 0

    def variables(self, *, cursor: int, page_size: int) -> dict:
        return {"first": page_size, "lastCreatedAt": cursor}

    def next_cursor(self, *, cursor: int, page: list[RawPoolRecord]) -> int:
        last_created_at = page[-1].created_at
        if last_created_at is None:
            return cursor
        return max(cursor, last_created_at)


OFFSET_PAGINATION = OffsetPagination()
TIMESTAMP_CURSOR_PAGINATION = TimestampCursorPagination()
