import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.database import Base, get_engine
from app.api.routes import auth, users
# Imported so their tables are registered on Base.metadata
from app.models import category, post, user  # noqa: F401

logger = logging.getLogger(__name__)

# Fails here, before the app exists, when SECRET_KEY is not configured
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage app lifecycle events.

    Startup: configure logging and create missing tables
    Shutdown: nothing to release; sessions are closed per request
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # In production, use migrations (Alembic) instead of create_all
    Base.metadata.create_all(bind=get_engine())
    logger.info("Database tables ready")
    yield


app = FastAPI(
    title="Blog API",
    description="Blog backend: accounts and demo content",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# All routes are prefixed with /api
app.include_router(auth.router, prefix="/api")
app.include_router(users.router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {"message": "Blog API", "version": "1.0.0"}


@app.get("/health")
async def health():
    """Health check endpoint - used by monitoring/deployment tools"""
    return {"status": "healthy"}
