"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first; variables that
are already set in the environment win over the file.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ADJUSTMENT = -10.0
DEFAULT_NET_CARBS = 30.0


@dataclass(frozen=True)
class Settings:
    """Calculator settings.

    Attributes:
        log_level: Logging level name (LOG_LEVEL)
        default_adjustment: Calorie adjustment in percent used when none is
            given (KETO_DEFAULT_ADJUSTMENT)
        default_net_carbs: Net carb limit in grams used when none is given
            (KETO_DEFAULT_NET_CARBS)
    """

    log_level: str = DEFAULT_LOG_LEVEL
    default_adjustment: float = DEFAULT_ADJUSTMENT
    default_net_carbs: float = DEFAULT_NET_CARBS


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, raw, default)
        return default


def get_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings from the environment (and an optional .env file)."""
    load_dotenv(env_file)

    return Settings(
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        default_adjustment=_float_env(
            "KETO_DEFAULT_ADJUSTMENT", DEFAULT_ADJUSTMENT
        ),
        default_net_carbs=_float_env("KETO_DEFAULT_NET_CARBS", DEFAULT_NET_CARBS),
    )
