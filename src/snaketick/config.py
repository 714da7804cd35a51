from __future__ import annotations

import os
from collections import namedtuple

from dotenv import load_dotenv

BOARD_WIDTH = 16
BOARD_HEIGHT = 24

TICK_MS = 120

INITIAL_LENGTH = 4
START_POSITION = (7, 7)
RESTART_POSITION = (8, 12)
INITIAL_FOOD = (5, 5)
INITIAL_DIRECTION = (1, 0)

Settings = namedtuple("Settings", ["tick_ms", "seed", "log_level"])


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env_file: str | None = None) -> Settings:
    """Read host settings from the environment (and a .env file if present).

    Board dimensions are fixed and never read from the environment.
    """
    load_dotenv(env_file)

    tick_ms = _int_env("SNAKETICK_TICK_MS", TICK_MS)
    if tick_ms <= 0:
        raise ValueError(f"SNAKETICK_TICK_MS must be positive, got {tick_ms}")

    seed = _int_env("SNAKETICK_SEED", None)
    log_level = os.getenv("SNAKETICK_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(tick_ms=tick_ms, seed=seed, log_level=log_level)
