"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dishcovery.api.food_images import router as food_images_router
from dishcovery.api.forum import router as forum_router
from dishcovery.api.inventory import router as inventory_router
from dishcovery.api.profile import router as profile_router
from dishcovery.api.recipes import router as recipes_router
from dishcovery.app_logging import configure_logging
from dishcovery.containers import AppContainer
from dishcovery.errors import DishcoveryError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Dishcovery", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(DishcoveryError)
    async def handle_dishcovery_error(
        request: Request, exc: DishcoveryError
    ) -> JSONResponse:
        if exc.status_code >= 500:  # noqa: PLR2004
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.message
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "details": str(exc)},
        )

    app.include_router(food_images_router)
    app.include_router(recipes_router)
    app.include_router(inventory_router)
    app.include_router(profile_router)
    app.include_router(forum_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
