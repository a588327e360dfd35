"""
Skills MCP Server — Main Orchestrator

Ties together:
  Transport -> Protocol -> Router -> ToolDispatcher -> CommandRunner

Flow:
  1. Transport reads one line from stdin
  2. Protocol parses and validates JSON-RPC 2.0
  3. Router dispatches to the correct handler
  4. Transport writes the response to stdout

One message is handled to completion before the next is read.
"""

import asyncio
import signal
import sys
from typing import Any, Dict, Optional

from skillsmcp.config import Config
from skillsmcp.server.logger import get_logger
from skillsmcp.server.transport import StdioTransport
from skillsmcp.server.protocol import (
    parse_message,
    validate_message,
    make_response,
    make_error,
    ProtocolError,
    INTERNAL_ERROR,
)
from skillsmcp.server.router import Router

log = get_logger("server")


class SkillsMCPServer:
    """
    Main server orchestrator.

    Usage:
        server = SkillsMCPServer(ToolDispatcher.from_config())
        await server.run()
    """

    def __init__(self, dispatcher=None, transport=None):
        Config.ensure_dirs()

        if dispatcher is None:
            from skillsmcp.tools import ToolDispatcher
            dispatcher = ToolDispatcher.from_config()
        self._dispatcher = dispatcher
        self._transport = transport or StdioTransport()
        self._router = Router(self._dispatcher)
        self._running = False
        self._handled = 0

    @property
    def router(self) -> Router:
        return self._router

    # -- main loop --

    async def run(self):
        """Start the server and process messages until EOF or signal."""
        log.info(f"Starting {Config.SERVER_NAME} v{Config.SERVER_VERSION}")
        await self._transport.start()

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, lambda: asyncio.create_task(self.shutdown()))
            except (NotImplementedError, RuntimeError):
                pass

        self._running = True
        log.info(f"Server ready — scripts={self._dispatcher.runner.scripts_dir}")
        sys.stderr.write(f"{Config.SERVER_NAME} running on stdio\n")
        sys.stderr.flush()

        try:
            while self._running:
                raw = await self._transport.read_line()
                if raw is None:
                    log.info("EOF on stdin — shutting down")
                    break
                response = await self.handle_raw(raw)
                if response is not None:
                    await self._transport.write_message(response)

        except asyncio.CancelledError:
            log.info("Server cancelled")
        except Exception as exc:
            log.error(f"Server error: {exc}", exc_info=True)
        finally:
            await self.shutdown()

    async def handle_raw(self, raw: bytes) -> Optional[Dict[str, Any]]:
        """Parse one framed message and produce its response, if any."""
        try:
            msg = parse_message(raw)
        except ProtocolError as exc:
            log.warning(f"Protocol error: {exc.message} (code={exc.code})")
            return make_error(None, exc.code, exc.message)
        return await self.handle_message(msg)

    async def handle_message(self, msg: Any) -> Optional[Dict[str, Any]]:
        """Process a single JSON-RPC message through the full pipeline."""
        request_id = msg.get("id") if isinstance(msg, dict) else None
        self._handled += 1

        try:
            msg_type = validate_message(msg)
            result = await self._router.route(msg_type, msg)

            if result is None or msg_type != "request":
                return None
            return make_response(request_id, result)

        except ProtocolError as exc:
            log.warning(f"Protocol error: {exc.message} (code={exc.code})")
            if request_id is not None:
                return make_error(request_id, exc.code, exc.message, exc.data)

        except Exception as exc:
            log.error(f"Unhandled error: {exc}", exc_info=True)
            if request_id is not None:
                return make_error(request_id, INTERNAL_ERROR, str(exc))

        return None

    async def shutdown(self):
        """Graceful shutdown — stop reading, close transport."""
        if not self._running:
            return
        self._running = False

        log.info(f"Shutting down — handled {self._handled} messages")
        await self._transport.close()
        log.info("Server stopped")
