"""
FastAPI application factory and entry point.

This module creates and configures the FastAPI application:
  1. Logging — standard library logging at settings.LOG_LEVEL
  2. Lifespan manager — prepares the stores on startup (creates empty
     JSON files or the SQL table), disposes the SQL engine on shutdown
  3. CORS middleware — allows the React client to make cross-origin requests
  4. Exception handlers — maps domain errors to HTTP responses
  5. Router registration — mounts the auth, developers, and legacy routes

Running locally:
    uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.database import engine
from app.exceptions import register_exception_handlers
from app.routers import auth, developers, legacy
from app.storage import get_developer_store, get_user_store


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
      Initializes both collections so the first request finds an empty
      collection instead of a missing file or table.

    Shutdown:
      Disposes of the database engine, closing all connections cleanly.
    """
    # --- Startup ---
    await get_user_store().initialize()
    await get_developer_store().initialize()
    logger.info("Storage ready (backend=%s)", settings.STORAGE_BACKEND)
    yield
    # --- Shutdown ---
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Developer directory REST API with JWT authentication",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(developers.router, prefix="/api/developers", tags=["Developers"])
app.include_router(legacy.router, prefix="/developers", tags=["Legacy"])


# ---------------------------------------------------------------------------
# Liveness
# ---------------------------------------------------------------------------

@app.get("/", response_class=PlainTextResponse, tags=["Health"])
async def root():
    """Plain-text liveness string kept from the first API version."""
    return "Developer Directory API is running"


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint for deployment probes (Kubernetes, Docker, etc.).

    Returns a simple JSON response indicating the service is running.
    """
    return {"status": "ok", "version": settings.APP_VERSION}
