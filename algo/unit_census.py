"""
Unit Census

Counts units on the board, optionally restricted to some columns, rows and
unit types. Read-only; the decision branches do not consult it, the turn
controller only logs it.
"""

from typing import Iterable, Optional

from .game_types import TurnSnapshot


def detect_enemy_units(snapshot: TurnSnapshot,
                       x_locations: Optional[Iterable[int]] = None,
                       y_locations: Optional[Iterable[int]] = None,
                       unit_types: Optional[Iterable[str]] = None) -> int:
    """
    Count units at the given locations.

    Args:
        snapshot: Current turn snapshot
        x_locations: Columns to scan, None for the full board width
        y_locations: Rows to scan, None for the full board height
        unit_types: Shorthands to count, None for every catalog type with
                    positive starting health

    Returns:
        Number of matching units on in-arena cells
    """
    if x_locations is None:
        x_locations = range(snapshot.arena_size)
    if y_locations is None:
        y_locations = list(range(snapshot.arena_size))
    else:
        y_locations = list(y_locations)

    if unit_types is None:
        wanted = {info.shorthand for info in snapshot.unit_catalog
                  if info.start_health is not None and info.start_health > 0}
    else:
        wanted = {str(t) for t in unit_types}

    count = 0
    for x in x_locations:
        for y in y_locations:
            location = (x, y)
            if not snapshot.in_arena_bounds(location):
                continue
            count += sum(1 for unit in snapshot.units_at(location) if str(unit.unit_type) in wanted)
    return count
