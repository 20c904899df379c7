"""
Configuration for the Flight Network.

Settings come from environment variables (a .env file is loaded first)
with defaults suited to the bundled dataset.
"""

import logging
import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "FLIGHT_NETWORK_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env(name: str) -> Optional[str]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def _env_float(name: str, default: float, minimum: float = 0.0) -> float:
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None
    if value <= minimum:
        raise ValueError(f"{ENV_PREFIX}{name} must be > {minimum}, got {value}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class NetworkSettings:
    """
    Runtime settings.

    Attributes:
        cache_ttl: How long centrality results stay cached.
        worker_timeout: Seconds to wait for the background worker before
            computing synchronously.
        default_speed: Cruise speed (km/h) for airlines without one.
        use_worker: Run centrality on the background worker.
        log_level: Root log level name for the HTTP service.
    """

    cache_ttl: timedelta = timedelta(minutes=30)
    worker_timeout: float = 5.0
    default_speed: float = 800.0
    use_worker: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "NetworkSettings":
        """
        Read settings from FLIGHT_NETWORK_* environment variables.

        Raises:
            ValueError: If a variable is set to an invalid value. The
                message names the variable.
        """
        defaults = cls()
        log_level = (_env("LOG_LEVEL") or defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"{ENV_PREFIX}LOG_LEVEL is not a log level: {log_level!r}")

        ttl_minutes = _env_float(
            "CACHE_TTL_MINUTES", defaults.cache_ttl.total_seconds() / 60
        )
        return cls(
            cache_ttl=timedelta(minutes=ttl_minutes),
            worker_timeout=_env_float("WORKER_TIMEOUT_SECONDS", defaults.worker_timeout),
            default_speed=_env_float("DEFAULT_SPEED_KMH", defaults.default_speed),
            use_worker=_env_bool("USE_WORKER", defaults.use_worker),
            log_level=log_level,
        )
