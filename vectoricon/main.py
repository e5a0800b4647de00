"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vectoricon import __version__
from vectoricon.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.vectoricon_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="vectoricon",
        description="SVG shapes → line-oriented vector icon commands",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all shape modules to trigger registration
    from vectoricon.engine.registry import load_handlers

    load_handlers()

    from vectoricon.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
