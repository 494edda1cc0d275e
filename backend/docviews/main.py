"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docviews.config import settings
from docviews.projections.emitters import register_document_views
from docviews.routes import views

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Console logging at the configured level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events for startup/shutdown."""
    configure_logging()
    # Startup: make the built-in views available to the API
    register_document_views()
    logger.info(
        "Views registered (missing field policy: %s)", settings.missing_field_policy
    )

    yield  # Application runs here


app = FastAPI(
    title="docviews",
    description="Decomposes documents into keyed index entries",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for frontend
# Parse comma-separated origins from config
_cors_origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

# Include API routers
app.include_router(views.router, prefix="/api")


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API info."""
    return {
        "name": "docviews API",
        "version": "0.1.0",
        "docs": "/docs",
    }
