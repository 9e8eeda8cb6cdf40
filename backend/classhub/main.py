from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import classhub.models  # noqa: F401  registers every mapper before the first query
from classhub.core.errors import register_exception_handlers
from classhub.core.logging import RequestLoggingMiddleware, configure_logging
from classhub.core.observability import PrometheusMiddleware, metrics_endpoint
from classhub.core.settings import settings
from classhub.db.base import Base
from classhub.db.session import dispose_engine, engine, get_db
from classhub.modules.router_registry import include_all_routers

configure_logging(level=settings.log_level)
logger = logging.getLogger(__name__)

if settings.is_production:
    if any(origin.strip() == "*" for origin in settings.allow_origins):
        raise RuntimeError("ALLOW_ORIGINS cannot include '*' in production")
    if settings.jwt_secret.startswith("change_me"):
        raise RuntimeError("JWT_SECRET must be set in production")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_schema:
        Base.metadata.create_all(bind=engine)
        logger.info("Database schema ensured")
    logger.info("%s %s starting (%s)", settings.project_name, settings.project_version, settings.environment)
    yield
    dispose_engine()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.project_name,
    version=settings.project_version,
    description="Classrooms, memberships, posts, files, assignments and submissions.",
    docs_url="/api-docs",
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-Id", "Accept"],
)

# Observability middleware
app.add_middleware(PrometheusMiddleware)
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

app.add_api_route("/metrics", metrics_endpoint, methods=["GET"], tags=["observability"], include_in_schema=False)
app.mount("/public", StaticFiles(directory=settings.ensure_public_dir()), name="public")

include_all_routers(app)


@app.get("/healthz", tags=["health"])
def healthcheck(db: Session = Depends(get_db)) -> dict[str, str]:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Healthcheck failed: %s", exc, exc_info=True)
        raise HTTPException(status_code=503, detail="Service unavailable") from exc
    return {"status": "ok", "database": "ok"}


@app.get("/version", tags=["health"])
def version() -> dict[str, str]:
    return {
        "version": settings.project_version,
        "environment": settings.environment,
    }
