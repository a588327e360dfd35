"""
Method Router — Dispatch MCP methods to handlers

Routes:
  initialize       -> server capabilities handshake
  initialized      -> notification (no response)
  tools/list       -> tool catalog
  tools/call       -> tool dispatcher
  ping             -> pong
"""

from typing import Any, Dict, Optional

from skillsmcp.config import Config
from skillsmcp.server.logger import get_logger
from skillsmcp.server.protocol import (
    initialize_result,
    tools_list_result,
    ProtocolError,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
)

log = get_logger("router")


class Router:
    """MCP method dispatcher. Holds no state between tool calls."""

    def __init__(self, dispatcher):
        self._dispatcher = dispatcher
        self._initialized = False
        log.info(f"Registered tools: {[t['name'] for t in dispatcher.list_tools()]}")

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def route(self, msg_type: str, msg: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Route a validated message to the appropriate handler.
        Returns the result payload or None for notifications.
        """
        method = msg.get("method", "")
        params = msg.get("params") or {}

        if msg_type in ("response", "error"):
            # Servers do not issue requests, so client replies are dropped
            return None

        if method == "initialize":
            return self._handle_initialize(params)

        if method in ("initialized", "notifications/initialized"):
            self._initialized = True
            return None

        if method == "notifications/cancelled":
            return None

        if method == "ping":
            return {}

        if method == "tools/list":
            return tools_list_result(self._dispatcher.list_tools())

        if method == "tools/call":
            return await self._handle_tools_call(params)

        if msg_type == "notification":
            return None

        raise ProtocolError(METHOD_NOT_FOUND, f"Unknown method: {method}")

    def _handle_initialize(self, params: Dict) -> Dict[str, Any]:
        log.info(
            f"Client initialize: {params.get('clientInfo', {}).get('name', '?')} "
            f"protocol={params.get('protocolVersion', '?')}"
        )
        return initialize_result(
            server_name=Config.SERVER_NAME,
            server_version=Config.SERVER_VERSION,
            protocol_version=Config.PROTOCOL_VERSION,
        )

    async def _handle_tools_call(self, params: Dict) -> Dict[str, Any]:
        name = params.get("name", "")
        args = params.get("arguments") or {}

        if not name:
            raise ProtocolError(INVALID_PARAMS, "Missing tool name")
        if not isinstance(args, dict):
            raise ProtocolError(INVALID_PARAMS, "Tool arguments must be an object")

        return await self._dispatcher.call_tool(name, args)
