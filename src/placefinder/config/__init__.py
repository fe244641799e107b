"""Configuration: schema and loading."""

from placefinder.config.loader import get_default_config_path, load_config
from placefinder.config.schema import AppConfig

__all__ = ["AppConfig", "get_default_config_path", "load_config"]
