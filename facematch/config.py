"""Runtime settings read from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

from .core.exceptions import FaceMatchError

load_dotenv()

DEFAULT_DATASET = "data/faces.txt"

class ConfigError(FaceMatchError):
    """Exception raised when a setting has an invalid value."""
    pass

@dataclass(frozen=True)
class Settings:
    dataset_path: str = DEFAULT_DATASET
    host: str = "0.0.0.0"
    port: int = 3002
    log_level: str = "INFO"

def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ConfigError(f"FACEMATCH_PORT must be an integer, got {value!r}")
    if not 0 < port < 65536:
        raise ConfigError(f"FACEMATCH_PORT must be between 1 and 65535, got {port}")
    return port

def _log_level(value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"FACEMATCH_LOG_LEVEL is not a logging level: {value!r}")
    return level

def get_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        ConfigError: If the port or log level is invalid.
    """
    return Settings(
        dataset_path=os.getenv("FACEMATCH_DATASET", DEFAULT_DATASET),
        host=os.getenv("FACEMATCH_HOST", "0.0.0.0"),
        port=_port(os.getenv("FACEMATCH_PORT", "3002")),
        log_level=_log_level(os.getenv("FACEMATCH_LOG_LEVEL", "INFO")),
    )
