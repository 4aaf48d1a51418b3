"""PGN retrieval from Chess.com and Lichess."""

from __future__ import annotations

import httpx

from .config import settings

CHESS_COM = "chess.com"
LICHESS = "lichess"
PGN_MARKER = "[Event"


class GameFetchError(Exception):
    """Upstream answered, but not with a usable PGN."""


async def fetch_chess_com_game(client: httpx.AsyncClient, game_id: str) -> str:
    # Chess.com rejects requests that do not look like they come from a browser.
    url = settings.chess_com_game_url.format(game_id=game_id)
    response = await client.get(url, headers={"User-Agent": settings.browser_user_agent})
    data = response.json()
    game = data.get("game") if isinstance(data, dict) else None
    pgn = game.get("pgn") if isinstance(game, dict) else None
    if not pgn:
        raise GameFetchError("PGN not found")
    return pgn


async def fetch_lichess_game(client: httpx.AsyncClient, game_id: str) -> str:
    url = settings.lichess_export_url.format(game_id=game_id)
    response = await client.get(url, params={"literate": 1})
    text = response.text
    if PGN_MARKER not in text:
        raise GameFetchError("Invalid Lichess ID")
    return text
