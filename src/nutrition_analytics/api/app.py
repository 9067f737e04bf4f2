"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nutrition_analytics.api.dashboard import router as dashboard_router
from nutrition_analytics.api.recommendations import router as recommendations_router
from nutrition_analytics.app_logging import configure_logging
from nutrition_analytics.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(dashboard_router)
    app.include_router(recommendations_router)

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        request: Request, exc: RuntimeError
    ) -> JSONResponse:
        """Log store failures and return a generic error."""
        logger.error(
            "Request failed", exc_info=exc, extra={"path": request.url.path}
        )
        detail = "Internal error"
        if container.settings.environment == "local":
            detail = f"{detail} (debug: {type(exc).__name__}: {exc})"
        return JSONResponse(status_code=500, content={"detail": detail})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
