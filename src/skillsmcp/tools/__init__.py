"""
Skills MCP Tools

Modules:
  catalog    — ordered tool descriptors (deploy, test, lint, format)
  dev_tools  — one handler per tool
  runner     — external command execution
  results    — ToolResult / ExecutionStep
"""

from typing import Any, Dict, List, Optional

from skillsmcp.config import Config
from skillsmcp.server.logger import get_logger
from skillsmcp.server.protocol import json_text, text_content, tool_result_content
from skillsmcp.tools import catalog
from skillsmcp.tools.dev_tools import HANDLERS
from skillsmcp.tools.runner import CommandRunner

log = get_logger("tools")


class ToolDispatcher:
    """
    Name -> handler lookup for tools/list and tools/call.

    Usage:
        dispatcher = ToolDispatcher(CommandRunner("scripts"))
        result = await dispatcher.call_tool("lint", {"fix": True})
    """

    def __init__(self, runner: CommandRunner):
        self._runner = runner
        self._handlers = dict(HANDLERS)

    @classmethod
    def from_config(cls) -> "ToolDispatcher":
        return cls(CommandRunner(Config.SCRIPTS_DIR, timeout=Config.COMMAND_TIMEOUT))

    @property
    def runner(self) -> CommandRunner:
        return self._runner

    def list_tools(self) -> List[Dict[str, Any]]:
        return catalog.list_tools()

    async def call_tool(self, name: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        handler = self._handlers.get(name)
        if handler is None:
            log.warning(f"Unknown tool requested: {name}")
            return tool_result_content([text_content(f"Unknown tool: {name}")], is_error=True)

        log.info(f"Calling {name} args={args}")
        try:
            result = await handler(args or {}, self._runner)
        except Exception as exc:
            log.error(f"Tool {name} failed: {exc}", exc_info=True)
            return tool_result_content([text_content(f"Error: {exc}")], is_error=True)

        payload = result.to_dict()
        log.info(f"Tool {name} finished success={payload['success']}")
        return tool_result_content([text_content(json_text(payload))])
