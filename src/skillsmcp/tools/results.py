"""
Tool results and execution steps

A ToolResult is built once per invocation: echoed parameters first,
then tool fields, then the outcome. Field order is kept so the
serialized text diffs cleanly between runs.
"""

from typing import Any, Dict, Optional

PENDING = "pending"
RUNNING = "running"
COMPLETED = "completed"
FAILED = "failed"

# Allowed status transitions for a step
_TRANSITIONS = {
    PENDING: {RUNNING},
    RUNNING: {COMPLETED, FAILED},
    COMPLETED: set(),
    FAILED: set(),
}


class ExecutionStep:
    """One stage of a multi-stage tool."""

    __slots__ = ("name", "status")

    def __init__(self, name: str):
        self.name = name
        self.status = PENDING

    def _move(self, status: str):
        if status not in _TRANSITIONS[self.status]:
            raise ValueError(f"Step {self.name}: cannot go from {self.status} to {status}")
        self.status = status

    def start(self):
        self._move(RUNNING)

    def complete(self):
        self._move(COMPLETED)

    def fail(self):
        self._move(FAILED)

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "status": self.status}


class ToolResult:
    """
    Outcome of one tool call.

    Usage:
        result = ToolResult(environment="dev", dry_run=True)
        step = result.add_step("validate")
        ...
        result.succeed("Dry run completed for dev")
    """

    def __init__(self, **params: Any):
        self.fields: Dict[str, Any] = dict(params)
        self.success: Optional[bool] = None
        self.message: Optional[str] = None
        self.error: Optional[str] = None

    def add_step(self, name: str) -> ExecutionStep:
        """Append a step and mark it running."""
        step = ExecutionStep(name)
        self.fields.setdefault("steps", []).append(step)
        step.start()
        return step

    def set(self, key: str, value: Any):
        self.fields[key] = value

    def succeed(self, message: str):
        self.success = True
        self.message = message

    def fail(self, error: str):
        self.success = False
        self.error = error

    def to_dict(self) -> Dict[str, Any]:
        d = {}
        for key, value in self.fields.items():
            d[key] = [s.to_dict() for s in value] if key == "steps" else value
        d["success"] = self.success
        if self.message is not None:
            d["message"] = self.message
        if self.error is not None:
            d["error"] = self.error
        return d
