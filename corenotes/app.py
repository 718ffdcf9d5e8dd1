"""
FastAPI application entry point for the Corenotes API.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from corenotes.config import get_settings
from corenotes.routes import router


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Corenotes REST API",
        description=(
            "FastAPI-based API with passwordless authentication and task management."
        ),
        version="1.0.0",
        openapi_url="/docs",
        docs_url="/reference",
        redoc_url=None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.website_base_url],
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Length"],
        allow_credentials=True,
    )
    app.include_router(router)
    return app


app = create_app()
