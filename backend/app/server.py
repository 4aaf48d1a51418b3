"""Local listener; serverless deployments import ``app.main:app`` instead."""

from __future__ import annotations

import logging

import uvicorn

from .config import settings
from .main import app

logger = logging.getLogger(__name__)


def run() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    if not settings.should_listen:
        logger.info("Serverless deployment detected; not starting a listener.")
        return
    logger.info(f"Server running at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
