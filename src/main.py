"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.routes import router
from src.config import get_settings
from src.logging_config import setup_logging
from src.pages import build_default_renderer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting page service")

    app.state.settings = settings
    app.state.renderer = build_default_renderer(settings)

    logger.info(
        "page service ready",
        extra={"base_url": settings.base_url, "request_timeout": settings.request_timeout},
    )

    yield

    logger.info("shutting down page service")


app = FastAPI(title="Post Pages", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
