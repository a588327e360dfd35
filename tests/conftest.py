"""Shared fixtures for Skills MCP tests."""

import os
import pytest


@pytest.fixture
def tmp_skills_dir(tmp_path):
    """Set SKILLS_DATA_DIR to a temp directory for isolated tests."""
    data_dir = tmp_path / ".skills-mcp"
    data_dir.mkdir()
    (data_dir / "logs").mkdir()
    os.environ["SKILLS_DATA_DIR"] = str(data_dir)

    from skillsmcp import config
    original = (
        config.Config.DATA_DIR, config.Config.LOG_DIR,
        config.Config.LOG_FILE, config.Config.ERROR_LOG,
    )
    config.Config.DATA_DIR = data_dir
    config.Config.LOG_DIR = data_dir / "logs"
    config.Config.LOG_FILE = data_dir / "logs" / "skills.log"
    config.Config.ERROR_LOG = data_dir / "logs" / "skills-errors.log"

    yield data_dir

    (
        config.Config.DATA_DIR, config.Config.LOG_DIR,
        config.Config.LOG_FILE, config.Config.ERROR_LOG,
    ) = original
    os.environ.pop("SKILLS_DATA_DIR", None)


@pytest.fixture
def scripts_dir(tmp_path):
    """An empty scripts directory: every stage is 'not configured'."""
    d = tmp_path / "scripts"
    d.mkdir()
    return d


@pytest.fixture
def write_script(scripts_dir):
    """Write a bash stage script into scripts_dir."""
    def _write(name, body):
        path = scripts_dir / name
        path.write_text("#!/usr/bin/env bash\n" + body + "\n")
        return path
    return _write


@pytest.fixture
def runner(scripts_dir):
    from skillsmcp.tools.runner import CommandRunner
    return CommandRunner(scripts_dir)


@pytest.fixture
def dispatcher(runner):
    from skillsmcp.tools import ToolDispatcher
    return ToolDispatcher(runner)
