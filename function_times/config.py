"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    workers: int = 1
    output: str = "text"  # "text" or "json"
    log_level: str = "WARNING"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in %s (%s), using defaults", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    return data


def _workers(value, default: int) -> int:
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        logger.warning("Invalid workers value %r, using %d", value, default)
        return default


def _log_level(value, default: str) -> str:
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Invalid log level %r, using %s", value, default)
        return default
    return level


def load_config(cli_args, yaml_data: dict) -> Config:
    """Build Config; precedence is CLI flag > env var > YAML > default."""
    defaults = Config()

    workers = getattr(cli_args, "workers", None)
    if workers is None:
        workers = os.environ.get("FUNCTION_TIMES_WORKERS", yaml_data.get("workers", defaults.workers))

    output = getattr(cli_args, "output", None) or yaml_data.get("output", defaults.output)

    log_level = "DEBUG" if getattr(cli_args, "verbose", False) else os.environ.get(
        "FUNCTION_TIMES_LOG_LEVEL", yaml_data.get("log_level", defaults.log_level)
    )

    return Config(
        workers=_workers(workers, defaults.workers),
        output=output,
        log_level=_log_level(log_level, defaults.log_level),
    )
