"""Game import endpoint returning PGN text from Chess.com or Lichess."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query

from ..errors import ApiError
from ..games import CHESS_COM, LICHESS, fetch_chess_com_game, fetch_lichess_game
from ..schemas import ErrorResponse, GameResponse
from ..upstream import get_http_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["games"])

CHESS_COM_BLOCKED_MESSAGE = "Chess.com blocked request. Please copy the PGN text manually."


@router.get(
    "/fetch-game",
    response_model=GameResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def fetch_game(
    platform: Optional[str] = Query(None),
    game_id: Optional[str] = Query(None, alias="gameId"),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> GameResponse:
    if not platform or not game_id:
        raise ApiError(400, "Missing params")

    if platform == CHESS_COM:
        try:
            pgn = await fetch_chess_com_game(client, game_id)
        except Exception as exc:
            # Any chess.com failure is usually a bot block; the user can paste the PGN instead.
            logger.warning(f"Chess.com fetch failed for game {game_id}: {exc!r}")
            raise ApiError(400, CHESS_COM_BLOCKED_MESSAGE) from exc
        return GameResponse(pgn=pgn)

    if platform == LICHESS:
        try:
            pgn = await fetch_lichess_game(client, game_id)
        except Exception as exc:
            logger.error(f"Lichess fetch failed for game {game_id}: {exc!r}")
            raise ApiError(500, str(exc) or exc.__class__.__name__) from exc
        return GameResponse(pgn=pgn)

    raise ApiError(400, f"Unsupported platform: {platform}")
