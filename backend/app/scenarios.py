"""Endgame training positions and the non-repeating picker."""

from __future__ import annotations

import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

RANDOM_CATEGORY = "random"


@dataclass(frozen=True)
class Scenario:
    fen: str
    title: str
    idea: str


SCENARIOS: Mapping[str, Tuple[Scenario, ...]] = MappingProxyType(
    {
        "king-pawn": (
            Scenario(
                "8/8/8/8/4k3/8/4P3/4K3 w - - 0 1",
                "King in Front",
                "Place your King IN FRONT of the pawn to control key squares (d4, e4, f4).",
            ),
            Scenario(
                "8/8/8/5k2/8/5P2/5K2/8 w - - 0 1",
                "The Opposition",
                "Move your King to face the enemy King. This forces them to step aside.",
            ),
            Scenario(
                "8/8/8/8/3k4/8/4P3/3K4 w - - 0 1",
                "Key Squares",
                "Reach the 6th rank ahead of the pawn to force a win.",
            ),
            Scenario(
                "8/8/8/8/8/2k5/1P6/1K6 w - - 0 1",
                "Pawn Breakthrough",
                "Sacrifice or maneuver to get the pawn to the 8th rank.",
            ),
            Scenario(
                "8/5k2/8/5P2/5K2/8/8/8 w - - 0 1",
                "Cutting Off",
                "Use your King to shoulder-barge the enemy King away.",
            ),
        ),
        "king-rook": (
            Scenario(
                "1R6/8/3P4/8/8/4k3/8/4K3 w - - 0 1",
                "Lucena Position",
                "The Bridge! Use your Rook to shield your King from checks.",
            ),
            Scenario(
                "2r5/8/8/8/4k3/8/3R4/3K4 w - - 0 1",
                "Philidor Position",
                "Keep your Rook on the 6th rank to stop the King. Draw technique.",
            ),
        ),
        "king-queen": (
            Scenario(
                "4k3/8/8/4k3/3Q4/8/8/8 w - - 0 1",
                "Queen Mate",
                "Box the enemy King into a corner. Be careful of Stalemate!",
            ),
            Scenario(
                "8/1P6/8/8/2k5/8/5q2/3K4 w - - 0 1",
                "Queen vs Pawn",
                "Bring the King closer while checking.",
            ),
        ),
    }
)


def parse_prev_index(raw: Optional[str]) -> Optional[int]:
    """Return the previous-index hint, or None when absent, malformed or negative."""
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value >= 0 else None


def pick_scenario(
    category: str,
    prev_index: Optional[int] = None,
    rng: random.Random | None = None,
) -> tuple[str, int, Scenario]:
    """Pick a scenario from ``category`` that differs from ``prev_index`` when possible.

    ``"random"`` and unknown categories are replaced with a uniformly chosen
    known category before picking.
    """
    rng = rng or random
    if category == RANDOM_CATEGORY or category not in SCENARIOS:
        category = rng.choice(list(SCENARIOS))
    options = SCENARIOS[category]
    index = rng.randrange(len(options))
    if len(options) > 1 and index == prev_index:
        index = (index + 1) % len(options)
    return category, index, options[index]
