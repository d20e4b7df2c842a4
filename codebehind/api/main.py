"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codebehind.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Code-Behind Generator",
        description="Partial class generation from interface documents",
        version="0.1.0",
    )

    # CORS — allow editor front-ends on other origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
