"""
Game Types and Engine Contract

Data structures shared by the planners, and the TurnSnapshot interface the
hosting game engine implements. The engine owns the board, the pathfinder
and the transport; everything here only describes what the policy consumes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

# (x, y) arena cell
Coordinate = Tuple[int, int]

# Named board edges, as the engine reports them
EDGE_TOP_RIGHT = "top_right"
EDGE_TOP_LEFT = "top_left"
EDGE_BOTTOM_LEFT = "bottom_left"
EDGE_BOTTOM_RIGHT = "bottom_right"

FRIENDLY_EDGES = (EDGE_BOTTOM_LEFT, EDGE_BOTTOM_RIGHT)


class UnitType(str, Enum):
    """Shorthand codes for the unit types the policy places"""
    FILTER = "FF"
    ENCRYPTOR = "EF"
    DESTRUCTOR = "DF"
    PING = "PI"
    EMP = "EI"
    SCRAMBLER = "SI"

    def __str__(self) -> str:
        return self.value


class UnitCategory(Enum):
    """Catalog category tag"""
    FIREWALL = "firewall"        # Stationary structure
    INFORMATION = "information"  # Mobile unit
    OTHER = "other"


@dataclass(frozen=True)
class UnitInformation:
    """One entry of the match's unit-type catalog"""
    shorthand: str
    cost: Tuple[float, float]  # (structure points, mobile points)
    category: UnitCategory = UnitCategory.OTHER
    attack_damage_walker: Optional[float] = None
    start_health: Optional[float] = None

    @property
    def total_cost(self) -> float:
        return self.cost[0] + self.cost[1]

    @property
    def is_firewall(self) -> bool:
        return self.category == UnitCategory.FIREWALL


@dataclass(frozen=True)
class DeployedUnit:
    """A unit currently on the board"""
    unit_type: str
    owner: int
    location: Coordinate
    attack_damage_walker: Optional[float] = None


@dataclass(frozen=True)
class BreachEvent:
    """A mobile unit reached a back edge; unit_owner is the scoring player"""
    location: Coordinate
    unit_owner: int


class TurnSnapshot(ABC):
    """
    Per-turn handle issued by the game engine.

    Read-mostly: the only mutating operations are spawn and upgrade attempts,
    which are best-effort and report success per coordinate instead of raising.
    A snapshot is only valid for the turn (or action frame) it was issued for.
    """

    @property
    @abstractmethod
    def turn_number(self) -> int:
        pass

    @property
    @abstractmethod
    def arena_size(self) -> int:
        pass

    @property
    @abstractmethod
    def unit_catalog(self) -> Sequence[UnitInformation]:
        pass

    @property
    @abstractmethod
    def breaches(self) -> Sequence[BreachEvent]:
        """Breach events of this action frame (empty on turn snapshots)"""
        pass

    @abstractmethod
    def in_arena_bounds(self, location: Coordinate) -> bool:
        pass

    @abstractmethod
    def units_at(self, location: Coordinate) -> List[DeployedUnit]:
        pass

    @abstractmethod
    def get_attackers(self, location: Coordinate) -> List[DeployedUnit]:
        """Deployed units able to damage a ground unit standing at location"""
        pass

    @abstractmethod
    def get_edge_locations(self, edge: str) -> List[Coordinate]:
        pass

    @abstractmethod
    def get_target_edge(self, location: Coordinate) -> str:
        """Edge a mobile unit spawned at location walks towards"""
        pass

    @abstractmethod
    def find_path_to_edge(self, location: Coordinate, edge: str) -> Optional[List[Coordinate]]:
        pass

    @abstractmethod
    def number_affordable(self, unit_type: str) -> int:
        pass

    @abstractmethod
    def attempt_spawn(self, unit_type: str, location: Coordinate) -> bool:
        pass

    @abstractmethod
    def attempt_upgrade(self, location: Coordinate) -> bool:
        pass

    def attempt_spawn_multiple(self, unit_type: str, locations: Sequence[Coordinate]) -> List[bool]:
        return [self.attempt_spawn(unit_type, location) for location in locations]

    def attempt_upgrade_multiple(self, locations: Sequence[Coordinate]) -> List[bool]:
        return [self.attempt_upgrade(location) for location in locations]
