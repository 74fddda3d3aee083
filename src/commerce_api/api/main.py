from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from commerce_api import __version__
from commerce_api.api.v1.routes import health, resource_routers
from commerce_api.core.config import Settings, settings
from commerce_api.core.error_handlers import register_error_handlers
from commerce_api.core.logging import get_logger
from commerce_api.data_access.db import create_all, dispose_engine

logger = get_logger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the application: routers, error mapping and table bootstrap."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("API starting up", extra={"env": app_settings.environment.value})
        if app_settings.create_tables:
            await create_all()
        yield
        await dispose_engine()
        logger.info("API shut down")

    app = FastAPI(
        title=app_settings.api_title,
        version=__version__,
        description="CRUD API for companies, customers, products, sales and company users.",
        lifespan=lifespan,
    )

    register_error_handlers(app)

    app.include_router(health.router)
    for router in resource_routers:
        app.include_router(router, prefix=app_settings.api_prefix)

    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "commerce_api.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    run()
