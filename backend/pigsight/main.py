"""FastAPI app factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pigsight.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pigsight_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """One HTTP connection pool shared by every analysis."""
    app.state.http_client = httpx.AsyncClient(timeout=settings.request_timeout_seconds)
    logger.info("Opened shared analyzer HTTP client")

    yield

    await app.state.http_client.aclose()
    del app.state.http_client
    logger.info("Closed shared analyzer HTTP client")


def create_app() -> FastAPI:
    app = FastAPI(
        title="PigSight",
        description="Draw the Pig personality analysis: analyzer acquisition + trait rules",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all rule modules to trigger registration
    from pigsight.engine.registry import load_rules

    load_rules()

    from pigsight.api.errors import register_exception_handlers
    from pigsight.api.router import api_router

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()
