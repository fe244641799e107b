"""Configuration loading from files and environment.

Supports:
- TOML config files
- Environment variables (PLACEFINDER_* prefix)
- .env files
- Multiple profiles (local, offline, ...)
"""

import os
import re
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from placefinder.config.schema import AppConfig
from placefinder.observability.logging import get_logger

logger = get_logger(__name__)

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def _substitute_env_vars(obj: Any) -> Any:
    """Recursively substitute environment variables in a data structure.

    Supports formats:
    - ${VAR_NAME}
    - ${VAR_NAME:-default}

    Unset variables without a default are left untouched.
    """
    if isinstance(obj, dict):
        return {k: _substitute_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_substitute_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        def replace_var(match):
            var_expr = match.group(1)
            if ":-" in var_expr:
                var_name, default_value = var_expr.split(":-", 1)
                return os.getenv(var_name.strip(), default_value)

            var_name = var_expr.strip()
            value = os.getenv(var_name)
            if value is None:
                logger.warning(
                    "env_var_not_found",
                    var_name=var_name,
                    suggestion="Check that the environment variable is set",
                )
                return match.group(0)
            return value

        return _ENV_VAR_PATTERN.sub(replace_var, obj)
    else:
        return obj


def load_config(
    config_path: Optional[Path] = None,
    profile: Optional[str] = None,
    env_file: Optional[Path] = None,
) -> AppConfig:
    """Load application configuration.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (profile values override the base file)
    3. Defaults

    Args:
        config_path: Path to TOML config file
        profile: Config profile to use (e.g., "offline")
        env_file: Path to .env file

    Returns:
        Loaded and validated configuration
    """
    if env_file and env_file.exists():
        load_dotenv(env_file)
        logger.info("loaded_env_file", path=str(env_file))

    config_data: dict[str, Any] = {}
    if config_path and config_path.exists():
        with open(config_path, "rb") as f:
            config_data = tomllib.load(f)
        logger.info("loaded_config_file", path=str(config_path))

        if profile and profile in config_data.get("profiles", {}):
            profile_data = config_data["profiles"][profile]
            config_data = {**config_data, **profile_data}
            logger.info("applied_profile", profile=profile)

        config_data = _substitute_env_vars(config_data)
        config_data.pop("profiles", None)

    config = AppConfig(**config_data)
    logger.info(
        "config_loaded",
        log_level=config.log_level.value,
        place_search_provider=config.place_search.provider.value,
        coordinate_store=config.coordinate_store.store_type.value,
    )

    return config


def get_default_config_path() -> Path:
    """Get the default config file path.

    Searches in order:
    1. ./config.toml
    2. ~/.placefinder/config.toml
    3. /etc/placefinder/config.toml
    """
    search_paths = [
        Path.cwd() / "config.toml",
        Path.home() / ".placefinder" / "config.toml",
        Path("/etc/placefinder/config.toml"),
    ]

    for path in search_paths:
        if path.exists():
            return path

    return search_paths[0]
