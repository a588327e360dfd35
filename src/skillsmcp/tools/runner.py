"""
Command Runner — run an external executable, capture its output

Scripts live in a single configured directory. A missing script is
"not configured" and returns None; only a script that runs and fails
is an error.
"""

import asyncio
from pathlib import Path
from typing import Optional, Sequence, Union

from skillsmcp.server.logger import get_logger

log = get_logger("runner")


class ExternalCommandError(Exception):
    """The command exited non-zero or could not be started."""

    def __init__(self, message: str, returncode: Optional[int] = None, output: str = ""):
        self.message = message
        self.returncode = returncode
        self.output = output
        super().__init__(message)


class CommandTimeoutError(TimeoutError):
    """The command outlived the runner's deadline and was killed."""

    def __init__(self, message: str, timeout: float):
        self.message = message
        self.timeout = timeout
        super().__init__(message)


class CommandOutput:
    __slots__ = ("argv", "stdout", "returncode")

    def __init__(self, argv: Sequence[str], stdout: str, returncode: int = 0):
        self.argv = list(argv)
        self.stdout = stdout
        self.returncode = returncode


class CommandRunner:
    """
    Runs commands one at a time; the caller awaits each to completion.

    Usage:
        runner = CommandRunner(scripts_dir=Path("scripts"), timeout=300)
        out = await runner.run_script("lint-run.sh", "--fix")
        if out is None:
            ...  # script not configured
    """

    def __init__(self, scripts_dir: Union[str, Path], timeout: Optional[float] = None, shell: str = "bash"):
        self.scripts_dir = Path(scripts_dir)
        self.timeout = timeout
        self.shell = shell

    def script_path(self, script_name: str) -> Path:
        return self.scripts_dir / script_name

    def has_script(self, script_name: str) -> bool:
        return self.script_path(script_name).is_file()

    async def run_script(self, script_name: str, *args: str) -> Optional[CommandOutput]:
        """Run a script from the scripts directory, or return None if it is absent."""
        path = self.script_path(script_name)
        if not self.has_script(script_name):
            log.debug(f"Script not configured: {path}")
            return None
        return await self.run([self.shell, str(path), *args])

    async def run(self, argv: Sequence[str]) -> CommandOutput:
        """Run argv, returning combined stdout/stderr as text."""
        log.info(f"Running: {' '.join(argv)}")
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as exc:
            log.error(f"Failed to start {argv[0]}: {exc}")
            raise ExternalCommandError(f"Command failed to start: {' '.join(argv)}: {exc}")

        try:
            raw, _ = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            proc.kill()
            await proc.wait()
            log.error(f"Timed out after {self.timeout}s: {' '.join(argv)}")
            raise CommandTimeoutError(
                f"Command timed out after {self.timeout}s: {' '.join(argv)}",
                self.timeout,
            )

        output = raw.decode("utf-8", errors="replace")
        if proc.returncode != 0:
            log.error(f"Exit {proc.returncode}: {' '.join(argv)}")
            message = f"Command failed with exit code {proc.returncode}: {' '.join(argv)}"
            if output.strip():
                message += f"\n{output.strip()}"
            raise ExternalCommandError(message, returncode=proc.returncode, output=output)

        return CommandOutput(argv, output, proc.returncode)
