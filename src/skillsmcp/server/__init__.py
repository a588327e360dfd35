"""Skills MCP Server — Raw protocol implementation."""

from skillsmcp.server.server import SkillsMCPServer
from skillsmcp.server.router import Router

__all__ = ["SkillsMCPServer", "Router"]
