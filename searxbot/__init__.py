"""
searxbot - web search and page visit tools for AI agent hosts
"""

__version__ = "0.1.0"
