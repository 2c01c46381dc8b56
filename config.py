import os
from dataclasses import dataclass
from typing import Optional


def _env_seed() -> Optional[int]:
    raw = os.environ.get('ALGO_RANDOM_SEED')
    if raw is None or raw.strip() == '':
        return None
    return int(raw)


@dataclass
class Config:
    """Process-level configuration for the starter algo"""

    # Logging
    LOG_LEVEL: str = os.environ.get('ALGO_LOG_LEVEL', 'INFO').upper()
    # Stdout belongs to the engine transport, so logs go to file + stderr only
    LOG_TO_FILE: bool = os.environ.get('ALGO_LOG_TO_FILE', 'True').lower() == 'true'

    # Fixed seed for reproducible matches (unset = generate one per match)
    RANDOM_SEED: Optional[int] = _env_seed()

    # Player index the engine assigns to this bot; breaches by anyone else count
    MY_PLAYER_ID: int = 1

    # Paths
    BASE_DIR: str = os.path.dirname(os.path.abspath(__file__))
    LOG_DIR: str = os.environ.get('ALGO_LOG_DIR', os.path.join(BASE_DIR, 'logs'))


# Create global config instance
config = Config()
