"""Tests for ToolResult and ExecutionStep."""

import pytest
from skillsmcp.tools.results import ExecutionStep, ToolResult


class TestExecutionStep:
    def test_starts_pending(self):
        assert ExecutionStep("build").status == "pending"

    def test_happy_path(self):
        step = ExecutionStep("build")
        step.start()
        step.complete()
        assert step.to_dict() == {"name": "build", "status": "completed"}

    def test_fail_from_running(self):
        step = ExecutionStep("build")
        step.start()
        step.fail()
        assert step.status == "failed"

    def test_cannot_skip_running(self):
        step = ExecutionStep("build")
        with pytest.raises(ValueError):
            step.complete()
        with pytest.raises(ValueError):
            step.fail()

    def test_cannot_regress(self):
        step = ExecutionStep("build")
        step.start()
        step.complete()
        with pytest.raises(ValueError):
            step.start()
        with pytest.raises(ValueError):
            step.fail()


class TestToolResult:
    def test_field_order(self):
        result = ToolResult(environment="dev", dry_run=True)
        result.add_step("validate").complete()
        result.set("simulated", True)
        result.succeed("done")
        assert list(result.to_dict()) == [
            "environment", "dry_run", "steps", "simulated", "success", "message",
        ]

    def test_add_step_is_running(self):
        result = ToolResult()
        step = result.add_step("validate")
        assert step.status == "running"
        assert result.to_dict()["steps"] == [{"name": "validate", "status": "running"}]

    def test_no_steps_key_without_steps(self):
        result = ToolResult(fix=False)
        result.succeed("ok")
        assert "steps" not in result.to_dict()

    def test_failure(self):
        result = ToolResult(check=True)
        result.fail("boom")
        d = result.to_dict()
        assert d["success"] is False
        assert d["error"] == "boom"
        assert "message" not in d
