"""
Skills MCP CLI — Command-line interface for the shared skills server

Commands:
    skills-mcp init        Create ~/.skills-mcp/ and generate config
    skills-mcp server      Start the MCP server (stdio mode)
    skills-mcp tools       List the tool catalog
    skills-mcp call        Invoke a tool locally and print its result
    skills-mcp mcp-config  Print agent client JSON config
"""

import asyncio
import json
import sys

import click

from skillsmcp import __version__
from skillsmcp.config import Config


@click.group()
@click.version_option(version=__version__, prog_name="skills-mcp")
def main():
    """Shared Skills MCP — deploy, test, lint and format tools for AI agents."""
    pass


@main.command()
def init():
    """Initialize: create ~/.skills-mcp/, generate config, print setup instructions."""
    Config.ensure_dirs()

    config_env = Config.DATA_DIR / "config.env"
    if not config_env.exists():
        config_env.write_text(
            "# Skills MCP Configuration\n"
            "# Uncomment and edit as needed.\n"
            "\n"
            "# SKILLS_SCRIPTS_DIR=./scripts\n"
            "# SKILLS_COMMAND_TIMEOUT=300\n"
            "# SKILLS_LOG_LEVEL=INFO\n"
        )

    click.echo(f"Skills MCP initialized at {Config.DATA_DIR}")
    click.echo(f"  Config:  {config_env}")
    click.echo(f"  Logs:    {Config.LOG_DIR}")
    click.echo(f"  Scripts: {Config.SCRIPTS_DIR}")
    click.echo()
    click.echo("Run `skills-mcp mcp-config` to get the client JSON snippet.")


@main.command()
def server():
    """Start the MCP server (stdio mode)."""
    from skillsmcp.server.server import SkillsMCPServer

    try:
        asyncio.run(SkillsMCPServer().run())
    except KeyboardInterrupt:
        pass


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print full descriptors as JSON.")
def tools(as_json):
    """List the tool catalog."""
    from skillsmcp.tools.catalog import list_tools

    catalog = list_tools()
    if as_json:
        click.echo(json.dumps(catalog, indent=2))
        return

    for tool in catalog:
        click.echo(f"{tool['name']:<8} {tool['description']}")
        schema = tool["inputSchema"]
        required = set(schema.get("required", []))
        for param, prop in schema["properties"].items():
            detail = prop["type"]
            if "enum" in prop:
                detail += f" {{{','.join(prop['enum'])}}}"
            if param in required:
                detail += ", required"
            elif "default" in prop:
                detail += f", default {json.dumps(prop['default'])}"
            click.echo(f"    {param}: {detail}")


@main.command()
@click.argument("name")
@click.option("--args", "raw_args", default="{}", help="Tool arguments as a JSON object.")
@click.option("--scripts-dir", type=click.Path(file_okay=False), default=None,
              help="Override the scripts directory.")
def call(name, raw_args, scripts_dir):
    """Invoke tool NAME locally and print the result."""
    from skillsmcp.tools import ToolDispatcher
    from skillsmcp.tools.runner import CommandRunner

    try:
        args = json.loads(raw_args)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="--args")
    if not isinstance(args, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--args")

    if scripts_dir:
        dispatcher = ToolDispatcher(CommandRunner(scripts_dir, timeout=Config.COMMAND_TIMEOUT))
    else:
        dispatcher = ToolDispatcher.from_config()

    response = asyncio.run(dispatcher.call_tool(name, args))
    for block in response["content"]:
        click.echo(block["text"])
    if response.get("isError"):
        sys.exit(1)


@main.command("mcp-config")
def mcp_config():
    """Print MCP config JSON for agent clients."""
    command, args = _find_executable()
    config = {
        "mcpServers": {
            "shared-skills": {
                "command": command,
                "args": args,
                "env": {"SKILLS_SCRIPTS_DIR": str(Config.SCRIPTS_DIR)},
            }
        }
    }

    click.echo("Add this to your agent's MCP settings:\n")
    click.echo(json.dumps(config, indent=2))


def _find_executable():
    """Find the skills-mcp command path and its server arguments."""
    import shutil
    path = shutil.which("skills-mcp")
    if path:
        return path, ["server"]
    # Fallback: python -m skillsmcp
    return sys.executable, ["-m", "skillsmcp", "server"]


if __name__ == "__main__":
    main()
