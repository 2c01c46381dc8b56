"""
Reactive Defense Planner

Patches every location the opponent has ever scored on. The full history
is replayed each turn, so a destructor destroyed later gets rebuilt.
"""

import logging

from .game_types import TurnSnapshot, UnitType
from .match_session import MatchSession

logger = logging.getLogger(__name__)


def build_reactive_defenses(snapshot: TurnSnapshot, session: MatchSession) -> int:
    """
    Attempt one destructor per recorded breach, one row above it.

    Building at y + 1 keeps the breached edge cell itself free, since edge
    cells are our own deploy lanes.

    Returns:
        Number of destructors actually placed
    """
    placed = 0
    for x, y in session.scored_on_locations:
        if snapshot.attempt_spawn(UnitType.DESTRUCTOR, (x, y + 1)):
            placed += 1

    if session.scored_on_locations:
        logger.debug(f"Reactive defense: {placed} placed for "
                     f"{len(session.scored_on_locations)} recorded breaches")
    return placed
