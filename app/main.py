"""
FastAPI application factory.

Creates and configures the FastAPI application instance and maps
booster errors to HTTP responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.booster.errors import (BoosterError, FrozenTaskError, NotFoundError, PartialBatchFailure,
                                PersistenceError, ValidationError, )
from app.core.config import settings
from app.core.logging import configure_logging

configure_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Weekly booster program scheduling for coached trainees.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")

ERROR_STATUS = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (FrozenTaskError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


@app.exception_handler(PartialBatchFailure)
async def partial_batch_failure_handler(request: Request, exc: PartialBatchFailure):
    return JSONResponse(status_code=status.HTTP_207_MULTI_STATUS, content=exc.result.model_dump(mode="json"))


@app.exception_handler(BoosterError)
async def booster_error_handler(request: Request, exc: BoosterError):
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            break
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "error_type": type(exc).__name__})


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Booster Scheduler API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "booster-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
