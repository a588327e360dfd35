"""Tests for the CommandRunner."""

import pytest
from skillsmcp.tools.runner import (
    CommandRunner,
    CommandTimeoutError,
    ExternalCommandError,
)


class TestRun:
    @pytest.mark.asyncio
    async def test_captures_stdout_and_stderr(self, runner):
        out = await runner.run(["bash", "-c", "echo out; echo err >&2"])
        assert out.returncode == 0
        assert "out" in out.stdout
        assert "err" in out.stdout

    @pytest.mark.asyncio
    async def test_nonzero_exit_raises(self, runner):
        with pytest.raises(ExternalCommandError) as exc_info:
            await runner.run(["bash", "-c", "echo broken >&2; exit 3"])
        assert exc_info.value.returncode == 3
        assert "exit code 3" in exc_info.value.message
        assert "broken" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_missing_executable_raises(self, runner):
        with pytest.raises(ExternalCommandError) as exc_info:
            await runner.run(["definitely-not-a-real-command-xyz"])
        assert exc_info.value.returncode is None
        assert "failed to start" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout_kills_and_raises(self, scripts_dir):
        runner = CommandRunner(scripts_dir, timeout=0.2)
        with pytest.raises(CommandTimeoutError) as exc_info:
            await runner.run(["bash", "-c", "sleep 5"])
        assert exc_info.value.timeout == 0.2
        assert isinstance(exc_info.value, TimeoutError)
        assert not isinstance(exc_info.value, ExternalCommandError)


class TestRunScript:
    @pytest.mark.asyncio
    async def test_absent_script_is_noop(self, runner):
        assert await runner.run_script("lint-run.sh", "--fix") is None

    @pytest.mark.asyncio
    async def test_present_script_gets_args(self, runner, write_script):
        write_script("lint-run.sh", 'echo "args: $*"')
        out = await runner.run_script("lint-run.sh", "--fix", "--paths=a,b")
        assert out.stdout.strip() == "args: --fix --paths=a,b"
        assert out.argv[0] == "bash"

    @pytest.mark.asyncio
    async def test_failing_script_raises(self, runner, write_script):
        write_script("format-run.sh", "exit 1")
        with pytest.raises(ExternalCommandError):
            await runner.run_script("format-run.sh")

    def test_has_script(self, runner, write_script):
        assert not runner.has_script("test-run.sh")
        write_script("test-run.sh", "true")
        assert runner.has_script("test-run.sh")

    def test_directory_is_not_a_script(self, runner, scripts_dir):
        (scripts_dir / "test-run.sh").mkdir()
        assert not runner.has_script("test-run.sh")
