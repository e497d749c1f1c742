from __future__ import annotations

from collections.abc import Iterable
import logging
import re

from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.entities.pool import RawPoolRecord


logger = logging.getLogger(__name__)


PROJECT_NAME = "Stargate v1"
WEBSITE_LINK = "https://stargate.finance/"
DEFAULT_NOTE_TEMPLATE = "The liquidity pool contract on Stargate v1 for the {name} pool."
MAX_SYMBOL_LENGTH = 45
ELLIPSIS = "..."

_HTML_TAG_RE = re.compile(r"<[^>]*>")


def is_invalid_text(value: str | None) -> bool:
    if value is None:
        return True
    if not value.strip():
        return True
    return _HTML_TAG_RE.search(value) is not None


def truncate_symbol(symbol: str, max_length: int = MAX_SYMBOL_LENGTH) -> str:
    if len(symbol) <= max_length:
        return symbol
    return symbol[: max_length - len(ELLIPSIS)] + ELLIPSIS


def _rejection_reasons(record: RawPoolRecord) -> list[tuple[str, str | None]]:
    reasons: list[tuple[str, str | None]] = []
    if is_invalid_text(record.name):
        reasons.append(("name", record.name))
    if is_invalid_text(record.symbol):
        reasons.append(("symbol", record.symbol))
    return reasons


def transform_pools(
    chain_id: str,
    records: Iterable[RawPoolRecord],
    *,
    note_template: str = DEFAULT_NOTE_TEMPLATE,
) -> list[ContractTag]:
    """Map valid pool records to contract tags, dropping any record with a bad name or symbol.

    ``note_template`` is formatted with ``name`` (untruncated) and ``symbol``.
    """
    tags: list[ContractTag] = []
    rejected = 0
    for record in records:
        reasons = _rejection_reasons(record)
        if reasons:
            rejected += 1
            for field_name, raw_value in reasons:
                logger.warning(
                    "tag_transform: skipped_pool pool_id=%s field=%s value=%r",
                    record.id,
                    field_name,
                    raw_value,
                )
            continue

        tags.append(
            ContractTag(
                contract_address=f"eip155:{chain_id}:{record.id}".lower(),
                public_name_tag=f"{truncate_symbol(record.symbol)} Pool",
                project_name=PROJECT_NAME,
                website_link=WEBSITE_LINK,
                public_note=note_template.format(name=record.name, symbol=record.symbol),
            )
        )

    logger.info(
        "tag_transform: transformed_pools chain_id=%s accepted=%s rejected=%s",
        chain_id,
        len(tags),
        rejected,
    )
    return tags
