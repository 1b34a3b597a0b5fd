"""API router factory with core endpoints."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, RedirectResponse

from app.utils.db import verify_db_connection

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_public_router() -> APIRouter:
    """Create router with the server-rendered teacher pages.

    Returns:
        APIRouter with page routes and root redirect.
    """
    from app.api.pages import router as pages_router

    router = APIRouter()

    @router.get("/", include_in_schema=False)
    async def root():
        """Redirect root to the teacher list."""
        return RedirectResponse(url="/teacher/list", status_code=status.HTTP_302_FOUND)

    router.include_router(pages_router)

    return router


def create_health_router() -> APIRouter:
    """Create router with liveness and database health checks.

    Returns:
        APIRouter with health endpoints.
    """
    router = APIRouter(tags=["Health"])

    @router.get("/health", status_code=status.HTTP_200_OK)
    async def health_check() -> dict:
        """Health check endpoint - basic application health."""
        return {"status": "healthy"}

    @router.get("/health/db", status_code=status.HTTP_200_OK, response_model=None)
    async def health_check_db() -> JSONResponse:
        """Deep health check - includes database connectivity check."""
        try:
            await verify_db_connection()
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content={"status": "healthy", "database": "connected"},
            )
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={
                    "status": "unhealthy",
                    "database": "disconnected",
                    "error": str(e),
                },
            )

    return router


def create_api_router() -> APIRouter:
    """Create router with the JSON teacher endpoints under /api.

    Returns:
        APIRouter with teacher API endpoints.
    """
    from app.api.teachers import router as teachers_router

    router = APIRouter(prefix=API_PREFIX)
    router.include_router(teachers_router)

    return router
