import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from redirect_app.config import settings
from redirect_app.database.connection import engine, Base
from redirect_app.logging_config import configure_logging
from redirect_app.api.errors import register_exception_handlers
from redirect_app.api.v1 import redirects, redirect

# Import models to ensure they're registered with Base
from redirect_app.models import Redirect  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup, release pooled connections on shutdown"""
    configure_logging()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    Base.metadata.create_all(bind=engine)
    yield
    logger.info("Closing database connections")
    engine.dispose()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL redirect registry built with FastAPI",
    debug=settings.debug,
    lifespan=lifespan,
    # Top-level paths belong to aliases, keep the docs under /api
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

register_exception_handlers(app)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/api/docs",
        "redoc": "/api/redoc"
    }


@app.get("/health")
@app.get("/healthcheck", include_in_schema=False)
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
# The catch-all /{alias} router goes last so it never shadows the API
app.include_router(redirects.router, prefix="/api")
app.include_router(redirect.router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
