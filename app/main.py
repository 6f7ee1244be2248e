"""
FastAPI application entry point.
Mounts routes and Prometheus metrics, configures logging.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.api.router import api_router
from app.core.logging_config import setup_logging
from app.db.session import engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Shutdown: return pooled connections."""
    yield
    await engine.dispose()


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Any unsupported method gets a bare 405 (Allow header only, no body)."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return Response(status_code=exc.status_code, headers=exc.headers)
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="User sign-up service: validates, de-duplicates and stores new accounts.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS for browser clients. Preflight OPTIONS is answered here, before routing.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
