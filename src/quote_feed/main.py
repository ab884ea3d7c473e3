"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quote_feed.config.settings import get_settings
from quote_feed.config.logging_config import setup_logging
from quote_feed.api.routers import quotes_router, market_router
from quote_feed.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Market quotes with a short-lived cache and provider fallbacks",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(quotes_router)
app.include_router(market_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
