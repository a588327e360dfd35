"""
STDIO Transport — newline-delimited JSON-RPC over stdin/stdout

Reads from stdin, writes to stdout.
NEVER pollutes stdout with logs.
"""

import sys
import json
import asyncio
from typing import Optional, Dict, Any

from skillsmcp.server.logger import get_logger

log = get_logger("transport")


class StdioTransport:
    """One JSON-RPC message per line in each direction."""

    def __init__(self):
        self.running = False
        self._reader: Optional[asyncio.StreamReader] = None
        self._stdout = None

    async def start(self):
        """Initialize async stdin reader and direct stdout writer."""
        loop = asyncio.get_running_loop()

        self._reader = asyncio.StreamReader(limit=2**20)
        protocol = asyncio.StreamReaderProtocol(self._reader)
        await loop.connect_read_pipe(lambda: protocol, sys.stdin.buffer)

        self._stdout = sys.stdout.buffer
        self.running = True
        log.info("Transport initialized")

    async def read_line(self) -> Optional[bytes]:
        """
        Read one framed message from stdin.
        Returns the raw line (blank lines skipped) or None on EOF.
        """
        if not self._reader:
            raise RuntimeError("Transport not started")

        while True:
            raw_bytes = await self._reader.readline()
            if not raw_bytes:
                return None
            if raw_bytes.strip():
                log.debug(f"[in] {len(raw_bytes)} bytes")
                return raw_bytes

    async def write_message(self, message: Dict[str, Any]):
        """Write a JSON-RPC message to stdout."""
        if self._stdout is None:
            raise RuntimeError("Transport not started")

        raw_bytes = (json.dumps(message, separators=(",", ":")) + "\n").encode("utf-8")
        self._stdout.write(raw_bytes)
        self._stdout.flush()
        log.debug(f"[out] id={message.get('id')} bytes={len(raw_bytes)}")

    async def close(self):
        self.running = False
        log.info("Transport closed")
