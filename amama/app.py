"""
FastAPI application entry point.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from amama.config import Settings, get_settings
from amama.errors import CORS_HEADERS, install_error_handlers
from amama.routes import router
from amama.static import router as static_router


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Amama EC Backend", version="0.1.0")

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        # CORSMiddleware only answers requests that carry an Origin header
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    install_error_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)
    # Catch-all static routes must be registered after the API
    app.include_router(static_router)
    return app


app = create_app()
