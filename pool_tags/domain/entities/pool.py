from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawPoolRecord:
    id: str
    name: str
    symbol: str
    created_at: int | None = None
