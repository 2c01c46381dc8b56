"""
Random Edge Spawner

Spends the budget for one mobile unit type by dropping units on random
friendly-edge cells. Mobile units can share a cell, so a cell is never
removed from the pool after a successful spawn.
"""

import logging
import random
from dataclasses import dataclass
from typing import List

from .game_types import FRIENDLY_EDGES, Coordinate, TurnSnapshot, UnitType

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


@dataclass
class SpawnReport:
    unit_type: str
    attempts: int = 0
    spawned: int = 0
    exhausted_attempts: bool = False  # Stopped on the attempt bound, budget left over


def friendly_edge_locations(snapshot: TurnSnapshot) -> List[Coordinate]:
    """Bottom-left edge followed by bottom-right edge."""
    locations: List[Coordinate] = []
    for edge in FRIENDLY_EDGES:
        locations.extend(tuple(c) for c in snapshot.get_edge_locations(edge))
    return locations


class RandomEdgeSpawner:
    """
    Deploys at uniformly random friendly-edge cells while the budget lasts.

    If every edge cell is blocked the engine keeps reporting the unit as
    affordable, so the loop is capped at max_attempts.
    """

    def __init__(self, rng: random.Random, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        self.rng = rng
        self.max_attempts = max_attempts

    def spend_budget(self, snapshot: TurnSnapshot, unit_type: str) -> SpawnReport:
        report = SpawnReport(unit_type=unit_type)
        edges = friendly_edge_locations(snapshot)
        if not edges:
            logger.warning(f"No friendly edge cells, cannot deploy {unit_type}")
            return report

        while snapshot.number_affordable(unit_type) >= 1:
            if report.attempts >= self.max_attempts:
                report.exhausted_attempts = True
                logger.warning(
                    f"Gave up deploying {unit_type} after {report.attempts} attempts "
                    f"({report.spawned} spawned) - no legal edge placement seems to remain"
                )
                break
            location = self.rng.choice(edges)
            report.attempts += 1
            if snapshot.attempt_spawn(unit_type, location):
                report.spawned += 1

        logger.debug(f"Random edge deploy {unit_type}: {report.spawned}/{report.attempts} spawned")
        return report


def deploy_random_scramblers(snapshot: TurnSnapshot, spawner: RandomEdgeSpawner) -> SpawnReport:
    """Send scramblers out at random edge cells to intercept enemy mobile units."""
    return spawner.spend_budget(snapshot, UnitType.SCRAMBLER)


def deploy_random_pings(snapshot: TurnSnapshot, spawner: RandomEdgeSpawner) -> SpawnReport:
    return spawner.spend_budget(snapshot, UnitType.PING)
