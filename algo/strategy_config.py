"""
Strategy Configuration

Loads the placement layouts and planner knobs from a JSON file so the
layouts can be swapped without code changes (and substituted in tests).

Usage:
    from algo.strategy_config import get_config

    # Named layout (tuple of (x, y) tuples, built-in default when absent)
    destructors = get_config().get_layout('destructors')

    # Any planner value (with fallback default)
    iterations = get_config().get('offense', 'swarm_iterations', default=100)

Environment:
    STRATEGY_CONFIG - Path to JSON config file (default: configs/starter.json)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from .game_types import Coordinate

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "configs" / "starter.json"

PlacementSet = Tuple[Coordinate, ...]

DESTRUCTORS = "destructors"
ENCRYPTORS = "encryptors"
FILTER_PROTECT = "filter_protect"

# Built-in layouts, used whenever the config file does not override them
DEFAULT_LAYOUTS: Dict[str, PlacementSet] = {
    DESTRUCTORS: (
        (0, 13), (27, 13), (1, 13), (26, 13), (22, 11), (5, 11), (25, 12),
        (13, 11), (14, 11), (15, 13), (12, 13), (23, 11), (4, 11), (8, 8),
        (19, 8), (9, 7), (18, 7), (5, 10), (22, 10),
    ),
    ENCRYPTORS: (
        (8, 10), (19, 10), (13, 10), (14, 10),
    ),
    FILTER_PROTECT: (
        (8, 9), (9, 9), (10, 9), (11, 9), (12, 9), (13, 9), (14, 9),
        (15, 9), (16, 9), (17, 9), (18, 9),
    ),
}


def to_placement_set(raw: Sequence[Sequence[int]]) -> PlacementSet:
    """Convert JSON [[x, y], ...] into an immutable tuple of coordinates."""
    return tuple((int(point[0]), int(point[1])) for point in raw)


class StrategyConfig:
    """
    Loads and provides access to layouts and planner settings from JSON.

    A missing or malformed file is logged and every lookup falls back to
    the caller's default (or the built-in layout).
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the strategy config.

        Args:
            config_path: Path to JSON config file. If not provided, uses
                        STRATEGY_CONFIG env var or default starter.json.
        """
        if config_path:
            self.path = Path(config_path)
        else:
            env_path = os.environ.get('STRATEGY_CONFIG')
            if env_path:
                self.path = Path(env_path)
            else:
                self.path = DEFAULT_CONFIG_PATH

        self._config: Dict[str, Any] = {}
        self._layouts: Dict[str, PlacementSet] = dict(DEFAULT_LAYOUTS)
        self._loaded = False
        self._load()

    def _load(self):
        """Load configuration from JSON file."""
        self._layouts = dict(DEFAULT_LAYOUTS)
        try:
            if self.path.exists():
                with open(self.path, 'r', encoding='utf-8') as f:
                    self._config = json.load(f)
                self._layouts.update(self._parse_layouts(self._config.get('layouts', {})))
                self._loaded = True
                logger.info(f"Loaded strategy config from: {self.path}")
                logger.info(f"  Config name: {self._config.get('name', 'unknown')}")
                self._log_key_values()
            else:
                logger.warning(f"Strategy config not found: {self.path}, using defaults")
                self._config = {}
                self._loaded = False
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in strategy config {self.path}: {e}")
            self._config = {}
            self._layouts = dict(DEFAULT_LAYOUTS)
            self._loaded = False
        except (TypeError, ValueError, IndexError, AttributeError) as e:
            logger.error(f"Malformed layout in strategy config {self.path}: {e}")
            self._config = {}
            self._layouts = dict(DEFAULT_LAYOUTS)
            self._loaded = False

    @staticmethod
    def _parse_layouts(raw_layouts: Dict[str, Any]) -> Dict[str, PlacementSet]:
        return {name: to_placement_set(points) for name, points in raw_layouts.items()}

    def _log_key_values(self):
        """Log key config values for verification."""
        for name, layout in sorted(self._layouts.items()):
            logger.info(f"  [layouts] {name}: {len(layout)} cells")

        off = self._config.get('offense', {})
        logger.info(f"  [offense] swarm_turn_interval={off.get('swarm_turn_interval')}, "
                    f"swarm_iterations={off.get('swarm_iterations')}, "
                    f"random_volley={off.get('random_volley')}")

        df = self._config.get('defense', {})
        logger.info(f"  [defense] filter_turn_interval={df.get('filter_turn_interval')}")

    def reload(self):
        """Reload configuration from file."""
        self._load()

    @property
    def name(self) -> str:
        return self._config.get('name', 'default')

    @property
    def is_loaded(self) -> bool:
        """Check if config was successfully loaded."""
        return self._loaded

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            section: Config section (e.g., 'offense', 'defense')
            key: Key within section (e.g., 'swarm_iterations')
            default: Default value if not found

        Returns:
            The config value or default
        """
        section_data = self._config.get(section, {})
        return section_data.get(key, default)

    def get_coordinate(self, section: str, key: str, default: Coordinate) -> Coordinate:
        value = self.get(section, key)
        if value is None:
            return default
        return (int(value[0]), int(value[1]))

    def get_coordinates(self, section: str, key: str, default: Sequence[Coordinate]) -> PlacementSet:
        value = self.get(section, key)
        if value is None:
            return tuple(default)
        return to_placement_set(value)

    def get_layout(self, name: str) -> PlacementSet:
        """
        Get a named placement layout.

        Raises:
            KeyError: if neither the file nor the built-in defaults define it
        """
        return self._layouts[name]

    @property
    def layout_names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._layouts))

    def get_section(self, section: str) -> Dict[str, Any]:
        return self._config.get(section, {})


# Global singleton instance
_config: Optional[StrategyConfig] = None


def get_config() -> StrategyConfig:
    """
    Get the global strategy config singleton.

    Returns:
        The StrategyConfig instance
    """
    global _config
    if _config is None:
        _config = StrategyConfig()
    return _config


def set_config_path(path: str):
    """
    Set the config path and reload.

    Used for testing or switching between configs at runtime.
    """
    global _config
    _config = StrategyConfig(path)


def reload_config():
    """Reload the current configuration from file."""
    global _config
    if _config:
        _config.reload()
