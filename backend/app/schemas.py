"""Pydantic schemas for the Chess Trainer API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CoachRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = None
    api_key: Optional[str] = Field(None, alias="apiKey")


class GameResponse(BaseModel):
    pgn: str


class ScenarioResponse(BaseModel):
    fen: str
    title: str
    idea: str
    type: str
    index: int = Field(..., ge=0)


class ErrorResponse(BaseModel):
    error: str
