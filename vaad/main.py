# vaad/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from vaad.auth.deps import get_auth_config
from vaad.core.settings import settings
from vaad.utils.logging_setup import setup_logging

# Import routers (routers should NOT call app.include_router() themselves)
from vaad.auth.router import router as auth_router
from vaad.api.routers.health_router import router as health_router
from vaad.api.routers.task_router import router as task_router
from vaad.api.routers.vendor_router import router as vendor_router
from vaad.api.routers.search_router import router as search_router

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to start without a usable signing key
    get_auth_config().require_signing_key()
    logger.info("Auth configuration loaded")
    yield


def create_app() -> FastAPI:
    setup_logging("vaad", level=settings.log_level)

    app = FastAPI(
        title="Va'ad Horim API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value
        return response

    # Routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(task_router)
    app.include_router(vendor_router)
    app.include_router(search_router)

    return app


# Uvicorn entrypoint: uvicorn vaad.main:app --reload
app = create_app()
