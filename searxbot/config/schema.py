"""Configuration schema using Pydantic."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SUPPORTED_LANGUAGES = (
    "all",
    "auto",
    "en-US",
    "en-GB",
    "de-DE",
    "fr-FR",
    "es-ES",
    "it-IT",
    "nl-NL",
    "pt-BR",
    "ru-RU",
    "ja-JP",
    "ko-KR",
    "zh-CN",
)


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SafeSearch(str, Enum):
    """Content filtering level forwarded to the search backend."""

    OFF = "Off"
    MODERATE = "Moderate"
    STRICT = "Strict"

    @property
    def level(self) -> int:
        return _SAFE_SEARCH_LEVELS[self]


_SAFE_SEARCH_LEVELS = {
    SafeSearch.OFF: 2,
    SafeSearch.MODERATE: 1,
    SafeSearch.STRICT: 0,
}


class SearchConfig(Base):
    """Search tool configuration (tools.web.search)."""

    base_url: str = Field(
        default="http://localhost/search",
        description="The base URL to use for the search engine.",
    )
    max_results: int = Field(
        default=5,
        ge=0,
        le=50,
        description="The maximum number of results to return (0 = unlimited).",
    )
    engines: list[str] = Field(
        default_factory=lambda: ["google", "bing", "wikipedia"],
        description="The engines to search in.",
    )
    safe_search: SafeSearch = Field(
        default=SafeSearch.OFF,
        description="The level of safety to apply to the search results.",
    )
    language: str = Field(default="en-US", description="The language to search in.")
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds.")

    @field_validator("engines")
    @classmethod
    def _dedupe_engines(cls, value: list[str]) -> list[str]:
        seen: dict[str, None] = {}
        for engine in value:
            name = engine.strip()
            if name:
                seen.setdefault(name, None)
        return list(seen)

    @field_validator("language")
    @classmethod
    def _check_language(cls, value: str) -> str:
        if value not in SUPPORTED_LANGUAGES:
            raise ValueError(f"language must be one of {SUPPORTED_LANGUAGES}")
        return value


class VisitConfig(Base):
    """Visit tool configuration (tools.web.visit)."""

    force_raw: bool = Field(
        default=False,
        description="Always return the raw page body instead of extracted text.",
    )
    max_content_length: int = Field(
        default=4096,
        ge=0,
        le=65536,
        description="Maximum length of extracted text (0 = unlimited).",
    )
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds.")
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; searxbot/0.1; +https://github.com/searxng/searxng)",
        description="User-Agent header sent when visiting pages.",
    )
    block_private_network: bool = Field(
        default=False,
        description="Refuse to visit localhost and private network addresses.",
    )


class WebToolsConfig(Base):
    """Web tools configuration."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    visit: VisitConfig = Field(default_factory=VisitConfig)


class ToolsConfig(Base):
    """Tools configuration."""

    web: WebToolsConfig = Field(default_factory=WebToolsConfig)


class Config(Base):
    """Root configuration for searxbot."""

    tools: ToolsConfig = Field(default_factory=ToolsConfig)


def config_json_schema() -> dict[str, Any]:
    """JSON schema of the on-disk (camelCase) configuration, for host settings UIs."""
    return Config.model_json_schema(by_alias=True)
