import logging

import uvicorn
from fastapi import FastAPI

from todo_app.connections import mongo_lifespan
from todo_app.api.handlers import register_exception_handlers
from todo_app.api.users import router as user_router
from todo_app.api.todos import router as todo_router
from todo_app.services.auth import TokenService
from todo_app.utils.config import Settings, settings as default_settings
from todo_app.utils.logger import configure_logging


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(title="Todo API (Mongo)", version="0.1.0", lifespan=mongo_lifespan)
    app.state.settings = settings
    app.state.token_service = TokenService.from_settings(settings)

    register_exception_handlers(app)
    app.include_router(user_router, prefix="/users")
    app.include_router(todo_router, prefix="/todos")
    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Starting on port %s", default_settings.port)
    uvicorn.run(app, host="0.0.0.0", port=default_settings.port)
