"""Tests for the MCP tools and the SSE app."""

import json

from starlette.testclient import TestClient

from form_builder import __version__
from form_builder.mcp_server import call_form_tool, create_mcp_server, create_sse_app, get_mcp_tools
from form_builder.mcp_server.tools import TOOL_HANDLERS


class TestToolDefinitions:
    """Tests for get_mcp_tools()."""

    def test_names_match_handlers(self):
        """Test that every advertised tool has a handler."""
        names = [tool["name"] for tool in get_mcp_tools()]
        assert names == list(TOOL_HANDLERS)

    def test_input_schemas(self):
        """Test that each tool requires the schema text."""
        for tool in get_mcp_tools():
            assert tool["inputSchema"]["type"] == "object"
            assert "schema_json" in tool["inputSchema"]["required"]


class TestCallFormTool:
    """Tests for call_form_tool()."""

    def test_validate_schema(self, tier_schema):
        """Test schema validation through the tool."""
        result = call_form_tool("validate_form_schema", {"schema_json": json.dumps(tier_schema)})
        assert result == {"valid": True, "error": None, "warnings": []}

    def test_validate_schema_syntax_error(self):
        """Test that bad JSON is reported, not raised."""
        result = call_form_tool("validate_form_schema", {"schema_json": "{"})
        assert result["valid"] is False
        assert result["error"].startswith("JSON Syntax Error")

    def test_format(self):
        """Test pretty-printing through the tool."""
        result = call_form_tool("format_form_json", {"schema_json": '{"sections":[]}'})
        assert result == {"formatted": '{\n  "sections": []\n}'}

    def test_format_invalid(self):
        """Test that formatting errors come back as an error entry."""
        result = call_form_tool("format_form_json", {"schema_json": "nope"})
        assert "Cannot format invalid JSON" in result["error"]

    def test_price(self, tier_schema):
        """Test pricing through the tool."""
        result = call_form_tool(
            "calculate_form_price",
            {"schema_json": json.dumps(tier_schema), "data": {"tier": "Pro"}, "base_price": 50},
        )
        assert result["additional_total"] == 20
        assert result["total_price"] == 70
        assert result["additional_charges"][0]["field_name"] == "tier"

    def test_price_data_as_text(self, tier_schema):
        """Test that data may be passed as JSON text."""
        result = call_form_tool(
            "calculate_form_price",
            {"schema_json": json.dumps(tier_schema), "data": '{"tier": "Pro"}'},
        )
        assert result["additional_total"] == 20

    def test_validate_data(self, tier_schema):
        """Test submission validation through the tool."""
        result = call_form_tool(
            "validate_form_data", {"schema_json": json.dumps(tier_schema), "data": {}}
        )
        assert result == {"is_valid": False, "errors": {"name": "Name is required"}}

    def test_summarize(self, tier_schema):
        """Test summaries through the tool."""
        result = call_form_tool(
            "summarize_form_data",
            {"schema_json": json.dumps(tier_schema), "data": {"tier": "Pro"}},
        )
        assert result["empty"] is False
        assert result["lines"] == ["Tier: Pro (+20.00€)"]

    def test_summarize_nothing(self, tier_schema):
        """Test a summary with no data."""
        result = call_form_tool(
            "summarize_form_data", {"schema_json": json.dumps(tier_schema), "data": {}}
        )
        assert result == {"empty": True, "lines": []}

    def test_invalid_schema(self):
        """Test that schema errors come back as an error entry."""
        result = call_form_tool(
            "calculate_form_price", {"schema_json": '{"sections": 1}', "data": {}}
        )
        assert result == {
            "error": 'Invalid form structure: missing required field "sections" (must be an array)'
        }

    def test_bad_arguments(self, tier_schema):
        """Test unexpected arguments."""
        result = call_form_tool("format_form_json", {"text": "{}"})
        assert "error" in result

    def test_unknown_tool(self):
        """Test calling a tool that does not exist."""
        assert call_form_tool("render_form", {}) == {"error": "Unknown tool: render_form"}


class TestSseApp:
    """Tests for the SSE Starlette app."""

    def test_health(self):
        """Test the health endpoint."""
        client = TestClient(create_sse_app(create_mcp_server()))
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "form-builder-mcp"
        assert body["version"] == __version__
        assert body["field_types"] == ["text", "email", "textarea", "number", "date", "select"]
