"""
FastAPI application factory.

    app = create_app()                      # production: lifespan connects
    app = create_app(settings, context)     # tests: context already built

When no DataContext is passed in, the lifespan handler builds one on startup
(connect pool, load error names) and disposes of it on shutdown.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from webapi.collections import DataContext
from webapi.config.settings import Settings, get_settings
from webapi.core.logging import RequestIDMiddleware, setup_logging
from webapi.utils.logging import get_project_version
from .error_handlers import register_exception_handlers
from .routes import ROUTERS

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    context: DataContext | None = None,
    *,
    configure_logging: bool = True,
) -> FastAPI:
    if settings is None:
        settings = get_settings()
    if configure_logging:
        setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = getattr(app.state, "context", None) is None
        if owned:
            app.state.context = await DataContext.create(settings)
        logger.info("app.startup", extra={"env": settings.ENV})
        try:
            yield
        finally:
            if owned:
                await app.state.context.close()
                app.state.context = None
            logger.info("app.shutdown")

    app = FastAPI(title="webapi", version=get_project_version(), lifespan=lifespan)
    app.state.context = context

    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)
    for router in ROUTERS:
        app.include_router(router)

    return app
