"""
Health Navigator Analytics API - Main Application
FastAPI backend serving derived health indicators to the dashboard and coach.
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from .config import settings
from .routers import insights


logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("=" * 60)
    logger.info(f"{settings.app_name} v{settings.app_version}")
    if settings.git_commit:
        logger.info(f"Git Commit: {settings.git_commit[:8]}")
    if settings.build_date:
        logger.info(f"Build Date: {settings.build_date}")
    logger.info("=" * 60)
    yield
    # Shutdown (if needed)


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Trends, goal progress, risk flags and status labels from health records",
    lifespan=lifespan,
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc",  # ReDoc
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(insights.router)


@app.get("/")
def root():
    """Root endpoint - API status."""
    response = {
        "message": "Welcome to Health Navigator Analytics API",
        "version": settings.app_version,
        "status": "healthy",
        "docs": "/docs"
    }
    if settings.git_commit:
        response["git_commit"] = settings.git_commit[:8]
    if settings.build_date:
        response["build_date"] = settings.build_date
    return response


@app.get("/health")
def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


@app.get("/api/version")
def version():
    """Version information endpoint."""
    response = {
        "app_name": settings.app_name,
        "version": settings.app_version,
    }
    if settings.git_commit:
        response["git_commit"] = settings.git_commit
        response["git_commit_short"] = settings.git_commit[:8]
    if settings.build_date:
        response["build_date"] = settings.build_date
    return response


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("healthnav.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
