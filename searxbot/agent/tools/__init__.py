"""Agent tools module."""

from searxbot.agent.tools.base import Tool
from searxbot.agent.tools.registry import ToolRegistry

__all__ = ["Tool", "ToolRegistry"]
