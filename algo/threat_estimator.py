"""
Threat Estimator

Scores candidate deployment points by the damage a slow ground unit would
soak up walking from each point to its natural exit edge, and picks the
cheapest one. Every tile on the path counts once (speed 1), and every
attacker covering that tile contributes its full walker damage.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .game_types import Coordinate, TurnSnapshot

logger = logging.getLogger(__name__)


@dataclass
class ThreatEstimate:
    """Chosen entry point plus the damage computed for every candidate."""
    location: Coordinate
    damages: List[float]


def path_damage(snapshot: TurnSnapshot, location: Coordinate) -> float:
    """Total walker damage along the path from location to its target edge."""
    edge = snapshot.get_target_edge(location)
    path = snapshot.find_path_to_edge(location, edge) or []

    total = 0.0
    for cell in path:
        for attacker in snapshot.get_attackers(cell):
            total += attacker.attack_damage_walker or 0.0
    return total


def least_damage_spawn_location(snapshot: TurnSnapshot,
                                candidates: Sequence[Coordinate]) -> ThreatEstimate:
    """
    Pick the candidate whose path takes the least damage.

    Ties go to the LAST of the equal candidates: the scan replaces the
    running best whenever a damage is <= the current minimum.

    Raises:
        ValueError: if candidates is empty
    """
    if not candidates:
        raise ValueError("least_damage_spawn_location needs at least one candidate")

    damages = np.array([path_damage(snapshot, tuple(c)) for c in candidates], dtype=float)
    for location, damage in zip(candidates, damages):
        logger.debug(f"Got dmg: {damage:.1f} for {tuple(location)}")

    best_index = int(np.flatnonzero(damages == damages.min())[-1])
    best = tuple(candidates[best_index])
    logger.info(f"Least damage entry {best} ({damages[best_index]:.1f} dmg) of {len(candidates)} candidates")

    return ThreatEstimate(location=best, damages=damages.tolist())
