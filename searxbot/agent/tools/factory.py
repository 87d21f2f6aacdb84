"""Tool registry factory for agent hosts."""

from collections.abc import Callable

from searxbot.agent.tools.registry import ToolRegistry
from searxbot.agent.tools.visit import VisitTool
from searxbot.agent.tools.websearch import WebSearchTool
from searxbot.config.schema import Config


def build_tool_registry(
    config: Config | Callable[[], Config] | None = None,
) -> ToolRegistry:
    """Build the registry with the search and visit tools.

    When ``config`` is callable it is invoked on every tool call, so the host
    can change settings between calls.
    """
    registry = ToolRegistry()
    if callable(config):
        get_config = config
        registry.register(WebSearchTool(search_config=lambda: get_config().tools.web.search))
        registry.register(VisitTool(visit_config=lambda: get_config().tools.web.visit))
        return registry

    config = config or Config()
    registry.register(WebSearchTool(search_config=config.tools.web.search))
    registry.register(VisitTool(visit_config=config.tools.web.visit))
    return registry
