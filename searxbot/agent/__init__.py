"""Agent-facing tools for searxbot."""
