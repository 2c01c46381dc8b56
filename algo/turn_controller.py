"""
Turn Controller

Entry point the game engine drives. For the life of a match the engine
calls initialize() once, then on_turn() once per turn with any number of
on_action_frame() calls between turns.

Per turn:
    1. DefenseBuilder        - baseline layout + filter upgrades
    2. Reactive defense      - patch every recorded breach
    3. OffensivePlanner      - swarm on every 10th turn, line push otherwise
"""

import logging
import random
import sys
from typing import Optional

from config import config as app_config

from .defense_builder import DefenseBuilder
from .game_types import TurnSnapshot
from .match_session import MatchSession
from .offensive_planner import SWARM, OffensivePlanner
from .reactive_defense import build_reactive_defenses
from .strategy_config import StrategyConfig, get_config
from .unit_census import detect_enemy_units

logger = logging.getLogger(__name__)


class TurnController:
    """
    Owns the match session and runs the planners in order each turn.
    """

    def __init__(self, seed: Optional[int] = None,
                 strategy_config: Optional[StrategyConfig] = None,
                 my_player_id: Optional[int] = None):
        """
        Args:
            seed: Fixed random seed; falls back to ALGO_RANDOM_SEED, then to
                  a freshly generated one at initialize()
            strategy_config: Layouts and planner settings (default: global config)
            my_player_id: Engine player index of this bot (default: config)
        """
        self.seed = seed if seed is not None else app_config.RANDOM_SEED
        self.my_player_id = my_player_id if my_player_id is not None else app_config.MY_PLAYER_ID
        self.strategy_config = strategy_config or get_config()

        self.defense_builder = DefenseBuilder(self.strategy_config)
        self.offensive_planner = OffensivePlanner(self.strategy_config)
        self.session: Optional[MatchSession] = None

    def initialize(self):
        logger.info("Configuring starter algo strategy...")
        seed = self.seed if self.seed is not None else random.randrange(sys.maxsize)
        self.session = MatchSession(seed=seed, my_player_id=self.my_player_id)
        logger.info(f"Set random seed to: {seed}")

    def _require_session(self) -> MatchSession:
        if self.session is None:
            raise RuntimeError("TurnController.initialize() must be called before the first turn")
        return self.session

    def on_turn(self, snapshot: TurnSnapshot) -> str:
        """
        Make a move for this turn.

        Returns:
            The offensive branch taken ("swarm" or "line_push")
        """
        session = self._require_session()
        turn = snapshot.turn_number
        logger.info(f"Performing turn {turn} of the starter algo strategy")

        if logger.isEnabledFor(logging.DEBUG):
            half = snapshot.arena_size // 2
            enemy_units = detect_enemy_units(snapshot, y_locations=range(half, snapshot.arena_size))
            logger.debug(f"Turn {turn}: {enemy_units} units on the enemy half")

        self.defense_builder.build(snapshot)
        build_reactive_defenses(snapshot, session)

        branch = self.offensive_planner.choose_branch(turn)
        if branch == SWARM:
            self.offensive_planner.swarm(snapshot, session)
        else:
            self.offensive_planner.line_push(snapshot)
        logger.info(f"Turn {turn}: {branch}")
        return branch

    def on_action_frame(self, snapshot: TurnSnapshot) -> int:
        """
        Record where the enemy scored on us. Fires many times per turn.

        Returns:
            Number of breach locations recorded from this frame
        """
        session = self._require_session()
        return session.record_breaches(snapshot.breaches)
