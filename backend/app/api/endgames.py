"""Endgame training scenario endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Path, Query, Response

from ..scenarios import parse_prev_index, pick_scenario
from ..schemas import ScenarioResponse

router = APIRouter(prefix="/endgame", tags=["endgames"])


@router.get("/{scenario_type}", response_model=ScenarioResponse)
def get_endgame(
    response: Response,
    scenario_type: str = Path(..., description="Category key or 'random'"),
    prev_index: Optional[str] = Query(None, alias="prevIndex"),
) -> ScenarioResponse:
    """
    Return one scenario from the requested category.

    Never hands back the index the client just played when the category has
    another position to offer.
    """
    category, index, scenario = pick_scenario(scenario_type, parse_prev_index(prev_index))
    response.headers["Cache-Control"] = "no-store"
    return ScenarioResponse(
        fen=scenario.fen,
        title=scenario.title,
        idea=scenario.idea,
        type=category,
        index=index,
    )
