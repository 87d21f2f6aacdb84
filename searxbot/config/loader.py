"""Configuration loading utilities."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from searxbot.config.schema import Config

_LEGACY_SEARCH_KEYS = {
    "baseURL": "baseUrl",
    "baseUrl": "baseUrl",
    "maxResults": "maxResults",
    "engines": "engines",
    "language": "language",
    "safesearch": "safeSearch",
    "safeSearch": "safeSearch",
}
_LEGACY_VISIT_KEYS = {
    "forceRaw": "forceRaw",
    "maxContentLength": "maxContentLength",
}
_DROPPED_SEARCH_KEYS = ("categories", "page", "pageno")


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".searxbot" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            data = _migrate_config(data)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValidationError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True, mode="json")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current.

    Sections that are not objects are left untouched for validation to reject.
    """
    if not isinstance(data, dict):
        return data
    tools = _section(data, "tools")
    web_cfg = _section(tools, "web") if tools is not None else None
    if web_cfg is None:
        return data
    search_cfg = _section(web_cfg, "search")
    visit_cfg = _section(web_cfg, "visit")
    if search_cfg is None or visit_cfg is None:
        return data

    # Move flat plugin fields (baseURL, maxResults, ...) -> tools.web.search.*
    for legacy_key, key in _LEGACY_SEARCH_KEYS.items():
        if legacy_key in data and key not in search_cfg:
            search_cfg[key] = data.pop(legacy_key)
        else:
            data.pop(legacy_key, None)

    # Move flat forceRaw/maxContentLength -> tools.web.visit.*
    for legacy_key, key in _LEGACY_VISIT_KEYS.items():
        if legacy_key in data and key not in visit_cfg:
            visit_cfg[key] = data.pop(legacy_key)
        else:
            data.pop(legacy_key, None)

    # tools.web.search.baseURL -> tools.web.search.baseUrl
    legacy_base_url = search_cfg.pop("baseURL", None)
    if legacy_base_url and not search_cfg.get("baseUrl"):
        search_cfg["baseUrl"] = legacy_base_url

    # tools.web.search.safesearch -> tools.web.search.safeSearch
    legacy_safe_search = search_cfg.pop("safesearch", None)
    if legacy_safe_search is not None and "safeSearch" not in search_cfg:
        search_cfg["safeSearch"] = legacy_safe_search

    # Categories and paging are no longer sent to the search backend
    for key in _DROPPED_SEARCH_KEYS:
        data.pop(key, None)
        search_cfg.pop(key, None)

    return data


def _section(parent: dict, key: str) -> dict | None:
    value = parent.setdefault(key, {})
    return value if isinstance(value, dict) else None
