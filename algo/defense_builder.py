"""
Defense Builder

Places and upgrades the fixed baseline layout every turn. Placement is
best-effort: cells that are occupied, invalid or unaffordable are skipped
by the engine and the rest of the batch still goes through.
"""

import logging
from typing import Optional

from .game_types import TurnSnapshot, UnitType
from .strategy_config import (
    DESTRUCTORS, ENCRYPTORS, FILTER_PROTECT, StrategyConfig, get_config,
)

logger = logging.getLogger(__name__)

DEFAULT_FILTER_TURN_INTERVAL = 5


class DefenseBuilder:
    """Destructor screen, encryptor core, and an upgraded filter shield."""

    def __init__(self, strategy_config: Optional[StrategyConfig] = None):
        cfg = strategy_config or get_config()
        self.destructors = cfg.get_layout(DESTRUCTORS)
        self.encryptors = cfg.get_layout(ENCRYPTORS)
        self.filter_protect = cfg.get_layout(FILTER_PROTECT)
        self.filter_turn_interval = int(
            cfg.get('defense', 'filter_turn_interval', DEFAULT_FILTER_TURN_INTERVAL))

    def should_place_filters(self, turn_number: int) -> bool:
        return turn_number % self.filter_turn_interval == 0

    def build(self, snapshot: TurnSnapshot):
        turn = snapshot.turn_number

        # Protect ourselves with destructors first, then the encryptor core
        placed = sum(snapshot.attempt_spawn_multiple(UnitType.DESTRUCTOR, self.destructors))
        placed += sum(snapshot.attempt_spawn_multiple(UnitType.ENCRYPTOR, self.encryptors))

        # Filters in front of the destructors, only every few turns
        if self.should_place_filters(turn):
            placed += sum(snapshot.attempt_spawn_multiple(UnitType.FILTER, self.filter_protect))

        # No-op on cells without an upgradeable filter
        upgraded = sum(snapshot.attempt_upgrade_multiple(self.filter_protect))

        logger.debug(f"Turn {turn}: placed {placed} defensive units, upgraded {upgraded}")
