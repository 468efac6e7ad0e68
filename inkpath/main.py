"""FastAPI application entry point for inkpath."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .routes import api_router
from .services.registry import registry

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger("inkpath")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup and announce shutdown."""
    logger.info(f"Starting inkpath API v{__version__}")

    cleanup = settings.get_capture_config().cleanup
    logger.info(
        f"Cleanup: min_distance={cleanup.min_distance}, tolerance={cleanup.tolerance}, "
        f"simplify above {cleanup.simplify_threshold} points"
    )

    valid_keys = settings.get_valid_api_keys()
    if valid_keys:
        logger.info(f"Loaded {len(valid_keys)} valid API keys")
    else:
        logger.warning("No API keys configured - running in development mode")

    yield

    logger.info(f"Shutting down inkpath API, {len(registry.sessions)} live sessions discarded")


app = FastAPI(
    title="inkpath API",
    description="Freehand stroke capture with normalized, cleaned-up vector output",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "inkpath API",
        "version": __version__,
        "status": "operational",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "version": __version__,
    }


def run():
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "inkpath.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
