"""
Offensive Planner

Two attack shapes, chosen by turn number:

- Swarm: every swarm_turn_interval turns, flood pings through the entry
  point whose path takes the least damage, topping up encryptors between
  spawns so the pings pick up shields on the way out.
- Line push: every other turn, wall off row 11 with the cheapest firewall
  and fire EMPs from a fixed cell behind it.
"""

import logging
from typing import Optional, Sequence

from .edge_spawner import DEFAULT_MAX_ATTEMPTS, RandomEdgeSpawner, deploy_random_pings
from .game_types import TurnSnapshot, UnitInformation, UnitType
from .match_session import MatchSession
from .strategy_config import ENCRYPTORS, StrategyConfig, get_config
from .threat_estimator import ThreatEstimate, least_damage_spawn_location

logger = logging.getLogger(__name__)

SWARM = "swarm"
LINE_PUSH = "line_push"


def cheapest_firewall(catalog: Sequence[UnitInformation]) -> Optional[UnitInformation]:
    """Firewall type with the lowest summed cost; the last one scanned wins a tie."""
    cheapest = None
    for info in catalog:
        if not info.is_firewall:
            continue
        if cheapest is None or info.total_cost <= cheapest.total_cost:
            cheapest = info
    return cheapest


class OffensivePlanner:

    def __init__(self, strategy_config: Optional[StrategyConfig] = None):
        cfg = strategy_config or get_config()
        self.encryptors = cfg.get_layout(ENCRYPTORS)

        self.swarm_turn_interval = int(cfg.get('offense', 'swarm_turn_interval', 10))
        self.swarm_iterations = int(cfg.get('offense', 'swarm_iterations', 100))
        self.swarm_candidates = cfg.get_coordinates('offense', 'swarm_candidates', [(13, 0), (14, 0)])
        self.random_volley = bool(cfg.get('offense', 'random_volley', False))

        self.line_row = int(cfg.get('offense', 'line_row', 11))
        self.line_x_start = int(cfg.get('offense', 'line_x_start', 27))
        self.line_x_end = int(cfg.get('offense', 'line_x_end', 5))
        self.burst_count = int(cfg.get('offense', 'burst_count', 22))
        self.burst_location = cfg.get_coordinate('offense', 'burst_location', (24, 10))

        self.max_spawn_attempts = int(cfg.get('edge_spawner', 'max_attempts', DEFAULT_MAX_ATTEMPTS))

    def choose_branch(self, turn_number: int) -> str:
        return SWARM if turn_number % self.swarm_turn_interval == 0 else LINE_PUSH

    def line_locations(self):
        """Row cells from line_x_start down to line_x_end, inclusive."""
        return [(x, self.line_row) for x in range(self.line_x_start, self.line_x_end - 1, -1)]

    def swarm(self, snapshot: TurnSnapshot, session: MatchSession) -> ThreatEstimate:
        if self.random_volley:
            spawner = RandomEdgeSpawner(session.rng, self.max_spawn_attempts)
            deploy_random_pings(snapshot, spawner)

        estimate = least_damage_spawn_location(snapshot, self.swarm_candidates)

        # Once the ping budget runs dry the remaining attempts just fail
        spawned = 0
        for _ in range(self.swarm_iterations):
            snapshot.attempt_spawn_multiple(UnitType.ENCRYPTOR, self.encryptors)
            if snapshot.attempt_spawn(UnitType.PING, estimate.location):
                spawned += 1

        logger.info(f"Swarm: {spawned} pings sent from {estimate.location}")
        return estimate

    def line_push(self, snapshot: TurnSnapshot):
        wall = cheapest_firewall(snapshot.unit_catalog)
        if wall is None:
            logger.warning("There are no firewalls in the unit catalog, skipping line placement")
        else:
            placed = sum(1 for loc in self.line_locations()
                         if snapshot.attempt_spawn(wall.shorthand, loc))
            logger.debug(f"Line push: {placed} {wall.shorthand} placed on row {self.line_row}")

        fired = 0
        for _ in range(self.burst_count):
            if snapshot.attempt_spawn(UnitType.EMP, self.burst_location):
                fired += 1
        logger.debug(f"Line push: {fired} EMPs from {self.burst_location}")
