"""
Developer workflow tools — deploy, test, lint, format

Each handler fills in declared defaults, runs its stage script(s) through
the CommandRunner and returns a ToolResult. A stage whose script is absent
still counts as completed. The counts reported by test, lint and format are
fixed placeholder figures, not parsed from script output, and every such
result carries "simulated": true.
"""

from typing import Any, Awaitable, Callable, Dict, List

from skillsmcp.server.logger import get_logger
from skillsmcp.tools.catalog import apply_defaults, get_descriptor
from skillsmcp.tools.results import ToolResult
from skillsmcp.tools.runner import CommandRunner, CommandTimeoutError, ExternalCommandError

log = get_logger("tools.dev")

# Failures that stop a tool's pipeline; anything else is a handler fault
STAGE_ERRORS = (ExternalCommandError, CommandTimeoutError)

# Placeholder figures reported when no real measurement exists
SIMULATED_TEST_COUNTS = {"passed": 42, "failed": 0, "skipped": 3}
SIMULATED_COVERAGE_PERCENT = 85.5
SIMULATED_LINT = {"errors": 0, "warnings": 2, "fixable": 2, "files_checked": 15}
SIMULATED_FORMAT = {"formatted": 5, "unchanged": 10}


def _choice(tool: str, args: Dict[str, Any], key: str) -> str:
    """Return args[key], checked against the schema enum."""
    value = args.get(key)
    if value is None:
        raise ValueError(f"Missing required parameter: {key}")
    allowed = get_descriptor(tool).input_schema["properties"][key]["enum"]
    if value not in allowed:
        raise ValueError(f"Invalid {key} {value!r}; expected one of {', '.join(allowed)}")
    return value


def _paths(args: Dict[str, Any]) -> List[str]:
    paths = args.get("paths") or []
    if isinstance(paths, str):
        paths = [paths]
    return [str(p) for p in paths]


def _paths_flags(paths: List[str]) -> List[str]:
    return [f"--paths={','.join(paths)}"] if paths else []


async def _run_stage(result: ToolResult, runner: CommandRunner, script: str, flags: List[str]):
    """
    Run one stage script. Returns (ok, output) where output is None when
    the script is not configured. On failure the result is marked failed.
    """
    try:
        out = await runner.run_script(script, *flags)
    except STAGE_ERRORS as exc:
        log.warning(f"Stage {script} failed: {exc.message}")
        result.fail(exc.message)
        return False, None
    return True, (out.stdout if out is not None else None)


async def deploy(args: Dict[str, Any], runner: CommandRunner) -> ToolResult:
    args = apply_defaults("deploy", args)
    environment = _choice("deploy", args, "environment")
    dry_run = bool(args["dry_run"])
    version = str(args["version"])

    result = ToolResult(environment=environment, dry_run=dry_run, version=version)

    stages = [
        ("validate", "deploy-validate.sh", [f"--env={environment}"]),
        ("build", "deploy-build.sh", [f"--env={environment}", f"--version={version}"]),
    ]
    if not dry_run:
        stages.append(("deploy", "deploy-execute.sh", [f"--env={environment}"]))

    simulated = False
    for name, script, flags in stages:
        step = result.add_step(name)
        try:
            out = await runner.run_script(script, *flags)
        except STAGE_ERRORS as exc:
            step.fail()
            log.warning(f"Deploy to {environment} stopped at {name}: {exc.message}")
            result.fail(exc.message)
            return result
        step.complete()
        if out is None:
            simulated = True

    if not dry_run:
        result.set("deployment_url", f"https://{environment}.example.com")
    result.set("simulated", simulated)
    result.succeed(
        f"Dry run completed for {environment}" if dry_run
        else f"Successfully deployed to {environment}"
    )
    return result


async def run_tests(args: Dict[str, Any], runner: CommandRunner) -> ToolResult:
    args = apply_defaults("test", args)
    test_type = _choice("test", args, "type")
    coverage = bool(args["coverage"])
    pattern = args.get("pattern")

    params = {"type": test_type, "coverage": coverage}
    if pattern is not None:
        params["pattern"] = pattern
    result = ToolResult(**params, passed=0, failed=0, skipped=0)

    flags = [f"--type={test_type}"]
    if coverage:
        flags.append("--coverage")
    if pattern:
        flags.append(f"--pattern={pattern}")

    ok, output = await _run_stage(result, runner, "test-run.sh", flags)
    if not ok:
        return result
    if output is not None:
        result.set("output", output)

    for key, value in SIMULATED_TEST_COUNTS.items():
        result.set(key, value)
    result.set("coverage_percent", SIMULATED_COVERAGE_PERCENT if coverage else None)
    result.set("simulated", True)
    result.succeed(
        f"All tests passed ({SIMULATED_TEST_COUNTS['passed']} passed, "
        f"{SIMULATED_TEST_COUNTS['skipped']} skipped)"
    )
    return result


async def lint(args: Dict[str, Any], runner: CommandRunner) -> ToolResult:
    args = apply_defaults("lint", args)
    fix = bool(args["fix"])
    paths = _paths(args)

    result = ToolResult(fix=fix, paths=paths or ["all"], errors=0, warnings=0, fixed=0)

    flags = (["--fix"] if fix else []) + _paths_flags(paths)
    ok, output = await _run_stage(result, runner, "lint-run.sh", flags)
    if not ok:
        return result
    if output is not None:
        result.set("output", output)

    fixed = SIMULATED_LINT["fixable"] if fix else 0
    result.set("errors", SIMULATED_LINT["errors"])
    result.set("warnings", SIMULATED_LINT["warnings"])
    result.set("fixed", fixed)
    result.set("files_checked", SIMULATED_LINT["files_checked"])
    result.set("simulated", True)
    result.succeed(
        f"Fixed {fixed} issues" if fix
        else f"Checked {SIMULATED_LINT['files_checked']} files ({SIMULATED_LINT['warnings']} warnings)"
    )
    return result


async def format_code(args: Dict[str, Any], runner: CommandRunner) -> ToolResult:
    args = apply_defaults("format", args)
    check = bool(args["check"])
    paths = _paths(args)

    result = ToolResult(check=check, paths=paths or ["all"], formatted=0, unchanged=0)

    flags = (["--check"] if check else []) + _paths_flags(paths)
    ok, output = await _run_stage(result, runner, "format-run.sh", flags)
    if not ok:
        return result
    if output is not None:
        result.set("output", output)

    # check mode never rewrites files
    formatted = 0 if check else SIMULATED_FORMAT["formatted"]
    result.set("formatted", formatted)
    result.set("unchanged", SIMULATED_FORMAT["unchanged"])
    result.set("check_passed", True if check else None)
    result.set("simulated", True)
    result.succeed("Format check passed" if check else f"Formatted {formatted} files")
    return result


Handler = Callable[[Dict[str, Any], CommandRunner], Awaitable[ToolResult]]

HANDLERS: Dict[str, Handler] = {
    "deploy": deploy,
    "test": run_tests,
    "lint": lint,
    "format": format_code,
}
