"""Tests for the tool catalog."""

import pytest
from skillsmcp.tools.catalog import TOOLS, list_tools, get_descriptor, apply_defaults


def _props(name):
    return get_descriptor(name).input_schema["properties"]


class TestCatalog:
    def test_order_and_membership(self):
        assert [t["name"] for t in list_tools()] == ["deploy", "test", "lint", "format"]

    @pytest.mark.parametrize("name", ["deploy", "test", "lint", "format"])
    def test_each_name_once(self, name):
        assert [t["name"] for t in list_tools()].count(name) == 1

    def test_descriptor_shape(self):
        for tool in list_tools():
            assert set(tool) == {"name", "description", "inputSchema"}
            assert tool["inputSchema"]["type"] == "object"
            assert tool["description"]

    def test_deterministic(self):
        assert list_tools() == list_tools()

    def test_returned_copies_do_not_mutate_catalog(self):
        tools = list_tools()
        tools[0]["name"] = "hacked"
        tools[0]["inputSchema"]["properties"].clear()
        assert list_tools()[0]["name"] == "deploy"
        assert "environment" in list_tools()[0]["inputSchema"]["properties"]

    def test_catalog_is_tuple(self):
        assert isinstance(TOOLS, tuple)


class TestParameterContracts:
    def test_deploy(self):
        schema = get_descriptor("deploy").input_schema
        props = schema["properties"]
        assert schema["required"] == ["environment"]
        assert props["environment"]["enum"] == ["dev", "staging", "prod"]
        assert "default" not in props["environment"]
        assert props["dry_run"]["type"] == "boolean"
        assert props["dry_run"]["default"] is False
        assert props["version"]["type"] == "string"
        assert props["version"]["default"] == "latest"

    def test_test(self):
        props = _props("test")
        assert get_descriptor("test").input_schema["required"] == []
        assert props["type"]["enum"] == ["unit", "integration", "e2e", "all"]
        assert props["type"]["default"] == "all"
        assert props["coverage"]["default"] is False
        assert props["pattern"]["type"] == "string"
        assert "default" not in props["pattern"]

    @pytest.mark.parametrize("name,flag", [("lint", "fix"), ("format", "check")])
    def test_lint_and_format(self, name, flag):
        props = _props(name)
        assert props[flag]["type"] == "boolean"
        assert props[flag]["default"] is False
        assert props["paths"]["type"] == "array"
        assert props["paths"]["items"] == {"type": "string"}
        assert props["paths"]["default"] == []


class TestApplyDefaults:
    def test_fills_missing(self):
        assert apply_defaults("deploy", {"environment": "dev"}) == {
            "environment": "dev", "dry_run": False, "version": "latest",
        }

    def test_caller_values_win(self):
        assert apply_defaults("lint", {"fix": True, "paths": ["src"]}) == {
            "fix": True, "paths": ["src"],
        }

    def test_none_means_default(self):
        assert apply_defaults("test", {"type": None})["type"] == "all"

    def test_default_list_not_shared(self):
        first = apply_defaults("format", {})
        first["paths"].append("x")
        assert apply_defaults("format", {})["paths"] == []
