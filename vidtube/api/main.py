import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vidtube import __version__
from vidtube.adapters.sqlite.migrator import SQLiteMigrator
from vidtube.api.deps import get_settings
from vidtube.api.schemas import ApiError
from vidtube.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    rules = load_rules(settings.rules_path)
    logger.info(
        "Rules %s loaded from %s", rules.project.rules_version, settings.rules_path
    )

    applied = SQLiteMigrator(settings.db_path).run_migrations()
    if applied:
        logger.info("Applied migrations: %s", ", ".join(applied))

    yield


app = FastAPI(
    title="VidTube API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# --- Error envelope ---
def _error_response(
    status_code: int, message: str, errors: list[Any] | None = None, headers: Any = None
) -> JSONResponse:
    body = ApiError(status_code=status_code, message=message, errors=errors or [])
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(by_alias=True)),
        headers=headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return _error_response(400, "Invalid request", errors=errors)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal server error")


# --- Routers ---
from vidtube.api.routes import (  # noqa: E402
    comments,
    dashboard,
    likes,
    media,
    playlists,
    subscriptions,
    tweets,
    users,
    videos,
)

API_PREFIX = "/api/v1"

app.include_router(users.router, prefix=f"{API_PREFIX}/users", tags=["Users"])
app.include_router(videos.router, prefix=f"{API_PREFIX}/videos", tags=["Videos"])
app.include_router(comments.router, prefix=f"{API_PREFIX}/comments", tags=["Comments"])
app.include_router(likes.router, prefix=f"{API_PREFIX}/likes", tags=["Likes"])
app.include_router(tweets.router, prefix=f"{API_PREFIX}/tweets", tags=["Tweets"])
app.include_router(playlists.router, prefix=f"{API_PREFIX}/playlists", tags=["Playlists"])
app.include_router(
    subscriptions.router, prefix=f"{API_PREFIX}/subscriptions", tags=["Subscriptions"]
)
app.include_router(dashboard.router, prefix=f"{API_PREFIX}/dashboard", tags=["Dashboard"])
app.include_router(media.router, prefix="/media", tags=["Media"])


# CORS (Allow Frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
