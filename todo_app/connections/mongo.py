import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import certifi
from fastapi import FastAPI
from mongoengine import connect, disconnect

from todo_app.utils.config import Settings


logger = logging.getLogger(__name__)


def init_mongo(settings: Settings, **client_kwargs: Any) -> None:
    if settings.mongo_tls:
        client_kwargs.setdefault("tlsCAFile", certifi.where())
    connect(db=settings.mongo_db, host=settings.mongo_uri, alias="default", tz_aware=True, **client_kwargs)
    logger.info("Connected to MongoDB database %s", settings.mongo_db)


def close_mongo() -> None:
    disconnect(alias="default")


@asynccontextmanager
async def mongo_lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_mongo(app.state.settings)
    try:
        yield
    finally:
        close_mongo()
