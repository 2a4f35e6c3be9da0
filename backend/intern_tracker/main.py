"""Intern Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InternTrackerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store initialized (and seeded on first run) on startup via lifespan context manager
    - The /api catch-all is registered after every API router

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Request log middleware: one line per request with method, path, status, duration
"""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from intern_tracker.api.error_handlers import register_error_handlers
from intern_tracker.api.routes import dashboard, health, interns, not_found
from intern_tracker.config import get_settings
from intern_tracker.infrastructure.json_store import init_store
from intern_tracker.infrastructure.observability import setup_logging
from intern_tracker.web import routes as web_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store(settings.data_file, seed=settings.seed_data)
    logger.info(
        f"Intern Dashboard API started ({settings.environment}), data file {settings.data_file}",
    )
    yield
    logger.info("Intern Dashboard API shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        f"{request.method} {request.url.path} {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return response


register_error_handlers(app)

# Routes: not_found must stay last among /api routers
app.include_router(health.router)
app.include_router(interns.router)
app.include_router(dashboard.router)
app.include_router(not_found.router)
app.include_router(web_routes.router)


def run() -> None:
    """Console entry point: serve with uvicorn."""
    uvicorn.run("intern_tracker.main:app", host=settings.host, port=settings.port)
