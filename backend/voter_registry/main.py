"""
Voter Registry Backend - FastAPI Application

Admins approve signups per constituency; accepted registrants manage their
own partition of voter records.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from redis.exceptions import RedisError

from voter_registry.config import get_settings
from voter_registry.core.exceptions import InternalError, RegistryError
from voter_registry.database.connections import get_mongo_client, close_connections
from voter_registry.database.registry import sync_registry, create_indexes
from voter_registry.routers import admin, auth, health, voters

logger = logging.getLogger("voter_registry")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Sync database registry
    - Create indexes

    Shutdown:
    - Close MongoDB and Redis connections
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting up Voter Registry Backend...")

    if settings.init_database_on_startup:
        try:
            client = await get_mongo_client()
            await sync_registry(client)
            await create_indexes(client)
            logger.info("Database registry synced and indexes created")
        except PyMongoError as e:
            logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down Voter Registry Backend...")
    await close_connections()
    logger.info("Database connections closed")


app = FastAPI(
    title="Voter Registry API",
    description="""
## Voter Registry API

### Features
- **Signup approval**: Admins accept or refuse signups of their constituency
- **Voter partitions**: Every accepted account owns a separate voter collection
- **Voters**: Create, list (paginated), fetch, update and delete voter records

### Authentication
Log in via `POST /api/login`; the session is carried by an HTTP-only cookie.
Admin signups are logged in immediately.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RegistryError)
async def registry_error_handler(request: Request, exc: RegistryError):
    body = {"message": exc.message}
    if isinstance(exc, InternalError):
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.error)
        if exc.error:
            body["error"] = exc.error
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(PyMongoError)
@app.exception_handler(RedisError)
async def store_error_handler(request: Request, exc: Exception):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error", "error": str(exc)},
    )


app.include_router(health.router)
app.include_router(auth.router, prefix="/api")
app.include_router(admin.router, prefix="/api")
app.include_router(voters.router, prefix="/api")


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Voter Registry API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
