"""Advisor Portal API.

Serves the advisor dashboard: a demo backend over an in-memory entity
store under /api, and a session-authenticated relay to the remote
MyAdvisor backend under /api/proxy.
"""

from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from . import __version__
from .api import auth_router, messages_router, proxy_router, users_router
from .config import Settings, settings as default_settings
from .core.exceptions import PortalException
from .remote_client import RemoteClient
from .seed import seed_demo_data
from .sessions import SessionStore
from .store import EntityStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Advisor Portal started (remote: {app.state.remote.base_url})")
    yield
    app.state.sessions.clear()
    logger.info("Advisor Portal shutting down")


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    if error.get("type") == "value_error":
        message = message.removeprefix("Value error, ")
    return f"{field}: {message}" if field else message


def register_exception_handlers(app: FastAPI) -> None:
    """Translate application errors into JSON responses."""

    @app.exception_handler(PortalException)
    async def portal_exception_handler(request: Request, exc: PortalException):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "validation_error", "message": _first_validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal_error", "message": "Internal server error"},
        )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[EntityStore] = None,
    remote_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment-derived settings
        store: Entity store to serve; a fresh one (seeded when
            SEED_DEMO_DATA is set) is created when omitted
        remote_transport: httpx transport for the remote backend, used to
            plug in a mock backend
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Advisor Portal",
        description="Advisor dashboard backend and MyAdvisor API proxy",
        version=__version__,
        lifespan=lifespan,
    )

    if store is None:
        store = EntityStore()
        if settings.SEED_DEMO_DATA:
            seed_demo_data(store)

    app.state.settings = settings
    app.state.store = store
    app.state.sessions = SessionStore(ttl=timedelta(hours=settings.SESSION_TTL_HOURS))
    app.state.remote = RemoteClient(settings.REMOTE_API_URL, transport=remote_transport)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers define their own prefixes, mounted once under /api
    app.include_router(auth_router, prefix="/api")
    app.include_router(messages_router, prefix="/api")
    app.include_router(users_router, prefix="/api")
    app.include_router(proxy_router, prefix="/api")

    # Health check
    @app.get("/health", tags=["health"])
    @app.get("/api/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    return app


def run(host: Optional[str] = None, port: Optional[int] = None, reload: Optional[bool] = None):
    """Run the server."""
    import uvicorn
    uvicorn.run(
        "advisor_portal.main:create_app",
        factory=True,
        host=host or default_settings.API_HOST,
        port=port or default_settings.API_PORT,
        reload=default_settings.API_RELOAD if reload is None else reload,
    )


if __name__ == "__main__":
    run()
