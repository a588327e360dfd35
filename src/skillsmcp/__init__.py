"""Shared Skills MCP — developer workflow tools for AI agents."""

__version__ = "1.0.0"
