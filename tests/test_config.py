import copy
import json

import pytest
from pydantic import ValidationError

from searxbot.config.loader import _migrate_config, load_config, save_config
from searxbot.config.schema import Config, SafeSearch, SearchConfig, config_json_schema


def test_config_defaults() -> None:
    config = Config()
    search = config.tools.web.search
    visit = config.tools.web.visit

    assert search.base_url == "http://localhost/search"
    assert search.max_results == 5
    assert search.engines == ["google", "bing", "wikipedia"]
    assert search.safe_search is SafeSearch.OFF
    assert search.language == "en-US"
    assert visit.force_raw is False
    assert visit.max_content_length == 4096
    assert visit.block_private_network is False


def test_search_config_limits() -> None:
    with pytest.raises(ValidationError):
        SearchConfig(max_results=51)
    with pytest.raises(ValidationError):
        SearchConfig(max_results=-1)
    with pytest.raises(ValidationError):
        SearchConfig(language="xx-XX")


def test_search_config_engines_are_ordered_and_unique() -> None:
    cfg = SearchConfig(engines=["bing", " google ", "bing", "", "wikipedia"])
    assert cfg.engines == ["bing", "google", "wikipedia"]


def test_config_accepts_camel_case_keys() -> None:
    config = Config.model_validate(
        {
            "tools": {
                "web": {
                    "search": {"baseUrl": "https://searx.example/search", "safeSearch": "Strict"},
                    "visit": {"forceRaw": True, "maxContentLength": 0},
                }
            }
        }
    )

    assert config.tools.web.search.base_url == "https://searx.example/search"
    assert config.tools.web.search.safe_search is SafeSearch.STRICT
    assert config.tools.web.visit.force_raw is True
    assert config.tools.web.visit.max_content_length == 0


def test_save_and_load_roundtrip(tmp_path) -> None:
    path = tmp_path / "config.json"
    config = Config()
    config.tools.web.search.max_results = 0
    config.tools.web.search.safe_search = SafeSearch.MODERATE
    config.tools.web.visit.force_raw = True

    save_config(config, path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["tools"]["web"]["search"]["safeSearch"] == "Moderate"
    assert raw["tools"]["web"]["visit"]["forceRaw"] is True

    reloaded = load_config(path)
    assert reloaded == config


def test_load_invalid_config_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")

    assert load_config(path) == Config()

    path.write_text(json.dumps({"tools": {"web": {"search": {"maxResults": 500}}}}))
    assert load_config(path) == Config()


def test_load_missing_config_returns_defaults(tmp_path) -> None:
    assert load_config(tmp_path / "missing.json") == Config()


def test_migrate_flat_plugin_fields() -> None:
    raw = {
        "baseURL": "http://searx.local/search",
        "maxResults": 10,
        "engines": ["duckduckgo"],
        "language": "en-US",
        "safesearch": "Strict",
        "categories": ["general", "news"],
        "page": 2,
        "forceRaw": True,
        "maxContentLength": 8192,
    }

    migrated = _migrate_config(copy.deepcopy(raw))
    search = migrated["tools"]["web"]["search"]
    visit = migrated["tools"]["web"]["visit"]

    assert search == {
        "baseUrl": "http://searx.local/search",
        "maxResults": 10,
        "engines": ["duckduckgo"],
        "language": "en-US",
        "safeSearch": "Strict",
    }
    assert visit == {"forceRaw": True, "maxContentLength": 8192}
    assert set(migrated) == {"tools"}

    config = Config.model_validate(migrated)
    assert config.tools.web.search.safe_search is SafeSearch.STRICT


def test_migrate_does_not_override_nested_values() -> None:
    raw = {
        "maxResults": 10,
        "tools": {"web": {"search": {"maxResults": 3, "baseURL": "http://a/search"}}},
    }

    migrated = _migrate_config(copy.deepcopy(raw))
    search = migrated["tools"]["web"]["search"]

    assert search["maxResults"] == 3
    assert search["baseUrl"] == "http://a/search"
    assert "baseURL" not in search
    assert "maxResults" not in migrated


def test_migrate_drops_category_and_page_fields() -> None:
    raw = {"tools": {"web": {"search": {"categories": ["images"], "pageno": 3}}}}

    migrated = _migrate_config(copy.deepcopy(raw))
    assert migrated["tools"]["web"]["search"] == {}


def test_config_json_schema_uses_camel_case() -> None:
    schema = config_json_schema()
    search_props = schema["$defs"]["SearchConfig"]["properties"]

    assert "baseUrl" in search_props
    assert "maxResults" in search_props
    assert search_props["maxResults"]["maximum"] == 50


@pytest.mark.parametrize(
    "body",
    [
        "[]",
        "null",
        '"text"',
        '{"tools": null}',
        '{"tools": {"web": []}}',
        '{"tools": {"web": {"search": null}}}',
        '{"tools": {"web": {"visit": 5}}, "maxResults": 3}',
    ],
)
def test_load_wrongly_shaped_config_falls_back_to_defaults(tmp_path, body) -> None:
    path = tmp_path / "config.json"
    path.write_text(body, encoding="utf-8")

    assert load_config(path) == Config()


def test_migrate_leaves_non_object_sections_alone() -> None:
    assert _migrate_config([]) == []
    assert _migrate_config({"tools": None}) == {"tools": None}
    assert _migrate_config({"tools": {"web": {"search": None}}}) == {
        "tools": {"web": {"search": None, "visit": {}}}
    }
