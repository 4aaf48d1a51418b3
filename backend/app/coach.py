"""Gemini-backed coach proxy."""

from __future__ import annotations

from typing import Any

import httpx

from .config import settings


class CoachConfigError(Exception):
    """Raised when neither the caller nor the server supplied an API key."""


class CoachUpstreamError(Exception):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Gemini API Error: {status_code} {body}")
        self.status_code = status_code
        self.body = body


def resolve_api_key(client_key: str | None) -> str:
    if client_key and client_key.strip():
        return client_key
    if not settings.gemini_api_key:
        raise CoachConfigError("API key is missing. Ensure GEMINI_API_KEY is set in the environment or .env")
    return settings.gemini_api_key


def _generate_url() -> str:
    return f"{settings.coach_api_base.rstrip('/')}/{settings.coach_model}:generateContent"


async def ask_coach(client: httpx.AsyncClient, prompt: str | None, api_key: str) -> Any:
    """Forward ``prompt`` to the generative-language API and return its JSON as is."""
    payload = {"contents": [{"parts": [{"text": prompt}]}]}
    response = await client.post(
        _generate_url(),
        params={"key": api_key},
        json=payload,
        headers={"Content-Type": "application/json"},
    )
    if not response.is_success:
        raise CoachUpstreamError(response.status_code, response.text)
    return response.json()
