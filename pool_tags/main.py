from __future__ import annotations

import logging

from fastapi import FastAPI

from pool_tags.api.routers.contract_tags import router as contract_tags_router
from pool_tags.shared.config import get_settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


configure_logging(get_settings().log_level)

app = FastAPI(title="Pool Contract Tags API")
app.include_router(contract_tags_router)
