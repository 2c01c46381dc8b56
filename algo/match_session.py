"""
Match Session

State that lives for one match: the random generator and the breach
history. Created by TurnController.initialize() and passed to every planner
that needs it, so nothing in the decision core relies on module globals.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List

from .game_types import BreachEvent, Coordinate

logger = logging.getLogger(__name__)


@dataclass
class MatchSession:
    """Per-match mutable state."""
    seed: int
    my_player_id: int = 1
    rng: random.Random = field(init=False, repr=False)

    # Append-only; never pruned for the life of the match
    scored_on_locations: List[Coordinate] = field(default_factory=list)

    def __post_init__(self):
        self.rng = random.Random(self.seed)

    def record_breaches(self, breaches: Iterable[BreachEvent]) -> int:
        """
        Append the location of every breach scored by the opponent.

        Duplicates are kept, so a cell breached twice gets reinforced twice.

        Returns:
            Number of locations appended
        """
        added = 0
        for breach in breaches:
            if breach.unit_owner != self.my_player_id:
                self.scored_on_locations.append(tuple(breach.location))
                added += 1
        if added:
            logger.debug(f"Recorded {added} breach(es), history size {len(self.scored_on_locations)}")
        return added
