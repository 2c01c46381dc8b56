"""
Starter Algo

Per-turn decision policy for a grid tower-defense bot: baseline defenses,
breach-reactive patches, and a swarm / line-push offense.
"""

from .game_types import (
    BreachEvent, Coordinate, DeployedUnit, TurnSnapshot, UnitCategory,
    UnitInformation, UnitType,
)
from .match_session import MatchSession
from .threat_estimator import ThreatEstimate, least_damage_spawn_location
from .edge_spawner import RandomEdgeSpawner, SpawnReport
from .defense_builder import DefenseBuilder
from .reactive_defense import build_reactive_defenses
from .offensive_planner import OffensivePlanner, cheapest_firewall
from .unit_census import detect_enemy_units
from .turn_controller import TurnController

__all__ = [
    'BreachEvent',
    'Coordinate',
    'DeployedUnit',
    'TurnSnapshot',
    'UnitCategory',
    'UnitInformation',
    'UnitType',
    'MatchSession',
    'ThreatEstimate',
    'least_damage_spawn_location',
    'RandomEdgeSpawner',
    'SpawnReport',
    'DefenseBuilder',
    'build_reactive_defenses',
    'OffensivePlanner',
    'cheapest_firewall',
    'detect_enemy_units',
    'TurnController',
]
