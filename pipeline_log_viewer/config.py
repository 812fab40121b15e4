"""Configuration loading from CLI args, env vars, and optional YAML file.

Precedence: CLI flag > environment variable > YAML > dataclass default.
"""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(ValueError):
    """Raised for unreadable or out-of-range configuration."""


@dataclass(frozen=True)
class Config:
    output_format: str = "text"
    color: bool = False
    show_stats: bool = False
    log_level: str = "WARNING"


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


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
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def _pick(cli_value, env_name: str, yaml_data: dict, key: str, default):
    if cli_value is not None:
        return cli_value
    env_value = os.environ.get(env_name)
    if env_value is not None:
        return env_value
    return yaml_data.get(key, default)


def load_config(cli_args, yaml_data: dict) -> Config:
    """Build Config from CLI args, env vars, and parsed YAML data."""
    output_format = str(_pick(
        getattr(cli_args, "output", None), "PIPELINE_OUTPUT",
        yaml_data, "output", Config.output_format,
    )).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"Unknown output format: {output_format}")

    log_level = str(_pick(
        "DEBUG" if getattr(cli_args, "verbose", False) else None, "PIPELINE_LOG_LEVEL",
        yaml_data, "log_level", Config.log_level,
    )).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {log_level}")

    # store_true flags only count as set when given
    color = _pick(
        True if getattr(cli_args, "color", False) else None, "PIPELINE_COLOR",
        yaml_data, "color", Config.color,
    )
    show_stats = _pick(
        True if getattr(cli_args, "stats", False) else None, "PIPELINE_STATS",
        yaml_data, "stats", Config.show_stats,
    )

    return Config(
        output_format=output_format,
        color=_parse_bool(color),
        show_stats=_parse_bool(show_stats),
        log_level=log_level,
    )
