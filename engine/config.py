"""
Chart constants and runtime settings.

Axis bounds are fixed. Runtime knobs come from environment variables,
which main.py may populate from a .env file before calling load_settings().
"""
import logging
import math
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# =============================================================================
# Fixed chart domain
# =============================================================================

MIN_RPM = 0.0
MAX_RPM = 6000.0
RPM_STEP = 50

MIN_FUEL_FLOW = 0.0
MAX_FUEL_FLOW = 50.0          # L/h, top of the Y axis
FLOW_SAFETY_CEILING = 48.0    # L/h, hard cap for generated max flow

DEFAULT_RPM = 1500.0


def clamp_rpm(rpm: float, fallback: float = DEFAULT_RPM) -> float:
    """Clamp to [MIN_RPM, MAX_RPM]; NaN has no position and maps to fallback."""
    rpm = float(rpm)
    if math.isnan(rpm):
        return fallback
    return min(max(rpm, MIN_RPM), MAX_RPM)


# =============================================================================
# Runtime settings
# =============================================================================

ENV_PREFIX = "BOAT_CHART_"


@dataclass(frozen=True)
class Settings:
    default_rpm: float = DEFAULT_RPM
    seed: Optional[int] = None
    feed_interval_ms: int = 200
    history_size: int = 300
    log_level: str = "INFO"


def _read_env(name: str, cast, default):
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring invalid {ENV_PREFIX}{name}={raw!r}, using {default!r}")
        return default


def load_settings() -> Settings:
    """Build Settings from BOAT_CHART_* environment variables."""
    default_rpm = _read_env("DEFAULT_RPM", float, DEFAULT_RPM)
    default_rpm = clamp_rpm(default_rpm)

    feed_interval_ms = _read_env("FEED_INTERVAL_MS", int, 200)
    if feed_interval_ms <= 0:
        logger.warning(f"Feed interval must be positive, got {feed_interval_ms}; using 200")
        feed_interval_ms = 200

    history_size = _read_env("HISTORY_SIZE", int, 300)
    if history_size < 2:
        logger.warning(f"History size must be at least 2, got {history_size}; using 300")
        history_size = 300

    log_level = _read_env("LOG_LEVEL", str, "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning(f"Unknown log level {log_level!r}, using INFO")
        log_level = "INFO"

    return Settings(
        default_rpm=default_rpm,
        seed=_read_env("SEED", int, None),
        feed_interval_ms=feed_interval_ms,
        history_size=history_size,
        log_level=log_level,
    )
