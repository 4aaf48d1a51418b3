"""Coach endpoint forwarding prompts to the generative-language API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from fastapi import APIRouter, Depends

from ..coach import CoachConfigError, ask_coach, resolve_api_key
from ..errors import ApiError
from ..schemas import CoachRequest, ErrorResponse
from ..upstream import get_http_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["coach"])

CONFIG_MISSING_MESSAGE = "Server configuration error: API Key missing."
COACH_OFFLINE_MESSAGE = "The Coach is currently offline (API Error)."


@router.post("/ask-coach", responses={500: {"model": ErrorResponse}})
async def ask(
    payload: CoachRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Any:
    try:
        api_key = resolve_api_key(payload.api_key)
    except CoachConfigError as exc:
        logger.error(str(exc))
        raise ApiError(500, CONFIG_MISSING_MESSAGE) from exc

    try:
        return await ask_coach(client, payload.prompt, api_key)
    except Exception as exc:
        logger.error(f"Coach Error: {exc}")
        raise ApiError(500, COACH_OFFLINE_MESSAGE) from exc
