"""
Skills MCP Configuration — Unified settings for the server

Load order: env vars > ~/.skills-mcp/config.env > defaults
"""

import os
from pathlib import Path


def _data_dir() -> Path:
    return Path(os.environ.get("SKILLS_DATA_DIR", str(Path.home() / ".skills-mcp")))


def _load_config_env():
    """Load key=value pairs from {SKILLS_DATA_DIR}/config.env if it exists."""
    config_file = _data_dir() / "config.env"
    if not config_file.exists():
        return
    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


def _parse_timeout(raw: str):
    """Seconds as float, or None when unset or non-positive."""
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


_load_config_env()


class Config:
    # Server identity
    SERVER_NAME = "shared-skills-mcp"
    SERVER_VERSION = "1.0.0"
    PROTOCOL_VERSION = "2024-11-05"

    # Paths
    DATA_DIR = _data_dir()
    LOG_DIR = DATA_DIR / "logs"
    SCRIPTS_DIR = Path(os.environ.get("SKILLS_SCRIPTS_DIR", str(Path.cwd() / "scripts")))

    # External commands
    COMMAND_TIMEOUT = _parse_timeout(os.environ.get("SKILLS_COMMAND_TIMEOUT", "0"))

    # Logging (NEVER to stdout — would corrupt MCP protocol)
    LOG_LEVEL = os.environ.get("SKILLS_LOG_LEVEL", "INFO")
    LOG_FILE = LOG_DIR / "skills.log"
    ERROR_LOG = LOG_DIR / "skills-errors.log"

    @classmethod
    def ensure_dirs(cls):
        """Create required directories."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
