from contextlib import asynccontextmanager
from fastapi import FastAPI
from levgroup import __version__
from levgroup.api.routes import router
from levgroup.core.cors import setup_cors
from levgroup.core.logging import setup_logging, get_logger

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Starting levgroup API...")

    yield

    logger.info("Shutting down levgroup API...")


app = FastAPI(
    title="levgroup API",
    description="Collapse near-duplicate log lines and messages by edit distance",
    version=__version__,
    lifespan=lifespan
)

setup_cors(app)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "levgroup API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/health"
    }
