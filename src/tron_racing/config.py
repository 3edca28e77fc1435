# Area: Shared
"""
tron_racing.config — Configuration
==================================

Configuration model and loader. Values come from, in order of
precedence: environment variables (including a ``.env`` file), then
the JSON config file, then the defaults below.

Environment variables:
    RACING_MAPS                  comma separated map resources
    RACING_LOG_FILE              log file path ("" disables file logging)
    RACING_LOG_LEVEL             DEBUG / INFO / WARNING / ERROR
    RACING_END_ROUND_WHEN_IDLE   end the round once nobody is racing
    RACING_ANNOUNCE_WINNER       center-message the winner
    RACING_TIME_PRECISION        decimal places kept from reported times
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

logger = logging.getLogger("tron_racing.config")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Environment variable -> config key
ENV_MAPPINGS = {
    "RACING_MAPS": "maps",
    "RACING_LOG_FILE": "log_file",
    "RACING_LOG_LEVEL": "log_level",
    "RACING_END_ROUND_WHEN_IDLE": "end_round_when_idle",
    "RACING_ANNOUNCE_WINNER": "announce_winner",
    "RACING_TIME_PRECISION": "time_precision",
}


class RacingConfig(BaseModel):
    """Validated racing server settings."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    maps: List[str] = Field(default_factory=list)
    log_file: str = "tron_racing.log"
    log_level: str = "INFO"
    end_round_when_idle: bool = True
    announce_winner: bool = True
    time_precision: int = Field(default=4, ge=0, le=9)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return value

    @field_validator("maps")
    @classmethod
    def _strip_maps(cls, value: List[str]) -> List[str]:
        return [m.strip() for m in value if m.strip()]


def _read_config_file(config_path: str) -> Dict[str, Any]:
    path = Path(config_path)
    if not path.exists():
        logger.warning(f"Config file {config_path} not found, using defaults")
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigurationError(config_path, [str(e)]) from e
    if not isinstance(data, dict):
        raise ConfigurationError(config_path, ["top level must be a JSON object"])
    return data


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key not in environ:
            continue
        value: Any = environ[env_key]
        if config_key == "maps":
            value = value.split(",")
        overrides[config_key] = value
    return overrides


def load_config(
    config_path: Optional[str] = None,
    dotenv_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RacingConfig:
    """
    Build a RacingConfig from file and environment.

    Args:
        config_path: Optional JSON config file
        dotenv_path: Optional .env file (default: search from the working dir)
        environ: Environment mapping (default: os.environ after loading .env)

    Raises:
        ConfigurationError: If the file is unreadable or a value is invalid
    """
    data: Dict[str, Any] = {}
    if config_path:
        data.update(_read_config_file(config_path))

    if environ is None:
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        environ = os.environ
    data.update(_env_overrides(environ))

    try:
        return RacingConfig(**data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(config_path or "environment", errors) from e
