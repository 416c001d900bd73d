"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fitness_tracker.api.nutrition import router as nutrition_router
from fitness_tracker.api.profile import router as profile_router
from fitness_tracker.api.training import router as training_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import DomainError, InvalidInputError, NotFoundError

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    InvalidInputError: HTTPStatus.UNPROCESSABLE_ENTITY,
    NotFoundError: HTTPStatus.NOT_FOUND,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting fitness tracker (%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = _STATUS_BY_ERROR.get(type(exc), HTTPStatus.BAD_REQUEST)
        logger.info(
            "%s %s rejected: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code,
        )
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "code": exc.code},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    app.include_router(nutrition_router)
    app.include_router(training_router)
    app.include_router(profile_router)
    return app
