"""Configuration module for searxbot."""

from searxbot.config.loader import get_config_path, load_config, save_config
from searxbot.config.schema import Config, SafeSearch, SearchConfig, VisitConfig

__all__ = [
    "Config",
    "SafeSearch",
    "SearchConfig",
    "VisitConfig",
    "get_config_path",
    "load_config",
    "save_config",
]
