"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (body limit, request context, CORS)
  - Mount the users router under /v1
  - Expose health, readiness and metrics endpoints

Collaborators:
  - RequestContextMiddleware: request ID, logging context and metrics
  - BodyLimitMiddleware: RFC7807 413 for oversized payloads
  - interfaces.api.http.router: /v1/users endpoints
  - container.get_user_repository: readiness ping

Notes:
  - The DB pool is only opened when the container uses PostgreSQL
    (APP_ENV test/testing/ci runs on the in-memory repository).
  - Middleware order matters: RequestContext -> BodyLimit -> CORS -> routes
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from ..container import get_user_repository
from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import service_unavailable
from ..crosscutting.logger import logger
from ..crosscutting.metrics import get_metrics_response
from ..crosscutting.middleware import BodyLimitMiddleware, RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, init_pool
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings and initializes pool."""
    settings = get_settings()

    if settings.is_production():
        settings.validate_security_requirements()

    uses_db = not settings.is_test_env()
    if uses_db:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    try:
        logger.info(
            "User API starting up",
            extra={
                "app_env": settings.app_env,
                "storage": "postgres" if uses_db else "in_memory",
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )
        yield
    finally:
        if uses_db:
            close_pool()
        logger.info("User API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()

    # R: Create FastAPI application instance with API metadata
    application = FastAPI(
        title="User API",
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "users", "description": "User lifecycle management"},
            {"name": "ops", "description": "Health, readiness and metrics"},
        ],
    )

    # R: Middleware order (bottom = first to execute):
    # 1. RequestContextMiddleware - sets request_id, records metrics
    # 2. BodyLimitMiddleware - rejects oversized bodies early
    # 3. CORSMiddleware - handles preflight
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept-Language", "X-Request-Id"],
    )
    application.add_middleware(BodyLimitMiddleware)
    application.add_middleware(RequestContextMiddleware)

    # R: Register API routes under /v1 prefix for versioning
    application.include_router(router, prefix="/v1")

    register_exception_handlers(application)

    @application.get("/healthz", tags=["ops"])
    def healthz(request: Request):
        """Liveness: the process answers (no dependency checks)."""
        return {"ok": True, "request_id": getattr(request.state, "request_id", None)}

    @application.get("/readyz", tags=["ops"])
    def readyz(request: Request):
        """Readiness: the user repository answers a ping."""
        db_status = "disconnected"
        try:
            if get_user_repository().ping():
                db_status = "connected"
        except RuntimeError as exc:
            # R: pool no inicializado (PoolNotInitializedError es RuntimeError).
            logger.warning("Ready check: DB unavailable", extra={"error": str(exc)})

        if db_status != "connected":
            raise service_unavailable("database")

        return {
            "ok": True,
            "db": db_status,
            "request_id": getattr(request.state, "request_id", None),
        }

    @application.get("/metrics", tags=["ops"])
    def metrics():
        """Expose Prometheus metrics (404 when METRICS_ENABLED=false)."""
        if not get_settings().metrics_enabled:
            return Response(status_code=404)
        body, content_type = get_metrics_response()
        return Response(content=body, media_type=content_type)

    return application


app = create_app()
