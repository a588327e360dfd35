"""
Tool Catalog — the fixed, ordered set of tool descriptors

Tools:
  deploy  — validate, build and ship to an environment
  test    — run the test suite
  lint    — run linters and static analysis
  format  — apply or check project formatting
"""

import copy
from typing import Any, Dict, List, Tuple


class ToolDescriptor:
    """Name, description and JSON Schema of one tool. Read-only once built."""

    __slots__ = ("_name", "_description", "_input_schema")

    def __init__(self, name: str, description: str, input_schema: Dict[str, Any]):
        self._name = name
        self._description = description
        self._input_schema = copy.deepcopy(input_schema)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def input_schema(self) -> Dict[str, Any]:
        return copy.deepcopy(self._input_schema)

    def defaults(self) -> Dict[str, Any]:
        """Declared default for every parameter that has one."""
        return {
            key: copy.deepcopy(prop["default"])
            for key, prop in self._input_schema.get("properties", {}).items()
            if "default" in prop
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "description": self._description,
            "inputSchema": self.input_schema,
        }

    def __repr__(self):
        return f"ToolDescriptor({self._name!r})"


_PATHS_PROPERTY = {
    "type": "array",
    "items": {"type": "string"},
    "default": [],
}

TOOLS: Tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        "deploy",
        "Deploy application to target environment (dev, staging, prod)",
        {
            "type": "object",
            "properties": {
                "environment": {
                    "type": "string",
                    "enum": ["dev", "staging", "prod"],
                    "description": "Target deployment environment",
                },
                "dry_run": {
                    "type": "boolean",
                    "description": "Simulate deployment without making changes",
                    "default": False,
                },
                "version": {
                    "type": "string",
                    "description": "Version tag to deploy",
                    "default": "latest",
                },
            },
            "required": ["environment"],
        },
    ),
    ToolDescriptor(
        "test",
        "Run test suite with optional coverage reporting",
        {
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": ["unit", "integration", "e2e", "all"],
                    "description": "Type of tests to run",
                    "default": "all",
                },
                "coverage": {
                    "type": "boolean",
                    "description": "Generate coverage report",
                    "default": False,
                },
                "pattern": {
                    "type": "string",
                    "description": "Test file pattern to match",
                },
            },
            "required": [],
        },
    ),
    ToolDescriptor(
        "lint",
        "Run code linters and static analysis",
        {
            "type": "object",
            "properties": {
                "fix": {
                    "type": "boolean",
                    "description": "Automatically fix issues where possible",
                    "default": False,
                },
                "paths": dict(_PATHS_PROPERTY, description="Specific paths to lint (empty means all)"),
            },
            "required": [],
        },
    ),
    ToolDescriptor(
        "format",
        "Format code according to project standards",
        {
            "type": "object",
            "properties": {
                "check": {
                    "type": "boolean",
                    "description": "Check formatting without making changes",
                    "default": False,
                },
                "paths": dict(_PATHS_PROPERTY, description="Specific paths to format (empty means all)"),
            },
            "required": [],
        },
    ),
)

_BY_NAME = {tool.name: tool for tool in TOOLS}


def list_tools() -> List[Dict[str, Any]]:
    """The catalog as wire dicts, in declaration order."""
    return [tool.to_dict() for tool in TOOLS]


def get_descriptor(name: str) -> ToolDescriptor:
    return _BY_NAME[name]


def apply_defaults(name: str, args: Dict[str, Any]) -> Dict[str, Any]:
    """Merge caller arguments over the tool's declared defaults."""
    merged = get_descriptor(name).defaults()
    merged.update({k: v for k, v in (args or {}).items() if v is not None})
    return merged
