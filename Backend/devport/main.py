# devport/main.py
"""
DevPort Backend - DevStudio playground and CreativePort portfolio builder
"""
import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, WebSocket
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

# Rate limiting
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from dotenv import load_dotenv
load_dotenv()

from devport.core.config import settings
from devport.core.exceptions import DevPortError
from devport.core.logging import log, log_section
from devport.lib.websocket import relay

log("STARTUP", "Environment check", {
    "storage_backend": settings.storage.backend,
    "openai_api_key_loaded": bool(settings.llm.openai_api_key),
    "chat_model": settings.llm.chat_model,
    "upload_dir": str(settings.uploads.upload_dir),
})


# ---------------------------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    log_section("STARTUP", "DevPort starting")
    settings.ensure_directories()

    from devport.db import connect_db, disconnect_db
    await connect_db()

    yield

    log("STARTUP", "Shutting down...")
    await disconnect_db()


# ---------------------------------------------------------------------------
# APP INITIALIZATION
# ---------------------------------------------------------------------------

app = FastAPI(
    title="DevPort",
    version="1.0.0",
    lifespan=lifespan,
)
app.state.relay = relay

# Monitoring
from devport.lib.monitoring import register_monitoring
register_monitoring(app)

if settings.cors_origins == ["*"] and not settings.debug:
    log("SECURITY", "Using allow_origins=['*'] - consider setting CORS_ORIGINS in production")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Default: 100 requests per minute per IP, RATE_LIMIT overrides
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
log("SECURITY", f"Rate limiting enabled: {settings.rate_limit}")


# ---------------------------------------------------------------------------
# ERROR HANDLERS
# ---------------------------------------------------------------------------

@app.exception_handler(DevPortError)
async def devport_error_handler(request: Request, exc: DevPortError):
    if exc.status_code >= 500:
        log("ERROR", f"{request.method} {request.url.path}: {exc.message}", exc.details or None)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    log("ERROR", f"{request.method} {request.url.path}: invalid request data", {"errors": str(exc.errors())[:500]})
    return JSONResponse(status_code=400, content={"message": "Invalid request data"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log("ERROR", f"{request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# ---------------------------------------------------------------------------
# WEBSOCKET
# ---------------------------------------------------------------------------

@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    await relay.serve(websocket)


# ---------------------------------------------------------------------------
# API ROUTES
# ---------------------------------------------------------------------------

from devport.api import (
    health,
    user,
    projects,
    files,
    chat,
    auth,
    portfolios,
    pages,
    sections,
    media,
    public,
)

app.include_router(health.router)
app.include_router(user.router)
app.include_router(projects.router)
app.include_router(projects.templates_router)
app.include_router(files.router)
app.include_router(chat.router)
app.include_router(auth.router)
app.include_router(portfolios.router)
app.include_router(portfolios.templates_router)
app.include_router(pages.router)
app.include_router(sections.router)
app.include_router(media.router)
app.include_router(public.router)


# ---------------------------------------------------------------------------
# STATIC FILES
# ---------------------------------------------------------------------------

settings.ensure_directories()
app.mount(
    settings.uploads.url_prefix,
    StaticFiles(directory=settings.uploads.upload_dir),
    name="uploads",
)


# ---------------------------------------------------------------------------
# RUN
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run(
        "devport.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
