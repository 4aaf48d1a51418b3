"""Outbound HTTP client shared by the proxy endpoints."""

from __future__ import annotations

from typing import AsyncIterator

import httpx

from .config import settings


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Yield a client for the lifetime of one request.

    Every outbound call gets the configured deadline so a hung upstream only
    fails its own request instead of holding it open forever.
    """
    async with httpx.AsyncClient(timeout=settings.upstream_timeout_seconds) as client:
        yield client
