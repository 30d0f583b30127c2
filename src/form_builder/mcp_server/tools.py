"""
MCP Tool definitions for the form builder.

Each tool takes the schema as JSON text (as an admin would paste it) and
answers a JSON-serializable dict. Failures come back as ``{"error": ...}``.
"""

import json
import logging
from typing import Any, Callable

from form_builder.editor import SchemaValidationError, format_schema_json, load_schema
from form_builder.pricing import calculate_pricing
from form_builder.summary import summarize
from form_builder.validation import validate_data, validate_schema

logger = logging.getLogger("form_builder.mcp")


def _parse_json(text: str | dict | None, what: str) -> Any:
    if text is None or isinstance(text, dict):
        return text or {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid {what} JSON: {e}") from e


def mcp_validate_form_schema(schema_json: str) -> dict[str, Any]:
    """Check an authored schema; report the first error and any warnings."""
    try:
        raw = json.loads(schema_json)
    except json.JSONDecodeError as e:
        return {"valid": False, "error": f"JSON Syntax Error: {e}", "warnings": []}
    return validate_schema(raw).model_dump()


def mcp_format_form_json(schema_json: str) -> dict[str, Any]:
    """Pretty-print schema JSON text."""
    return {"formatted": format_schema_json(schema_json)}


def mcp_calculate_form_price(
    schema_json: str,
    data: dict | str | None = None,
    base_price: float = 0.0,
) -> dict[str, Any]:
    """Price the selected options of a submission."""
    schema = load_schema(schema_json)
    pricing = calculate_pricing(schema, _parse_json(data, "data"), base_price)
    return {
        **pricing.model_dump(),
        "additional_total": pricing.additional_total,
    }


def mcp_validate_form_data(schema_json: str, data: dict | str | None = None) -> dict[str, Any]:
    """Validate every field of a submission."""
    schema = load_schema(schema_json)
    return validate_data(schema, _parse_json(data, "data")).model_dump()


def mcp_summarize_form_data(
    schema_json: str,
    data: dict | str | None = None,
    show_empty: bool = False,
    compact: bool = False,
) -> dict[str, Any]:
    """Summarize a submission as display rows."""
    schema = load_schema(schema_json)
    summary = summarize(schema, _parse_json(data, "data"), show_empty=show_empty, compact=compact)
    if summary is None:
        return {"empty": True, "lines": []}
    return {"empty": summary.is_empty, "lines": summary.to_lines(), **summary.model_dump()}


TOOL_HANDLERS: dict[str, Callable[..., dict[str, Any]]] = {
    "validate_form_schema": mcp_validate_form_schema,
    "format_form_json": mcp_format_form_json,
    "calculate_form_price": mcp_calculate_form_price,
    "validate_form_data": mcp_validate_form_data,
    "summarize_form_data": mcp_summarize_form_data,
}


def call_form_tool(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Run a tool by name.

    Unknown tools, bad JSON and invalid schemas are reported as
    ``{"error": ...}`` rather than raised.
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return {"error": f"Unknown tool: {name}"}
    try:
        return handler(**arguments)
    except (SchemaValidationError, ValueError, TypeError) as e:
        logger.warning(f"Tool {name} failed: {e}")
        return {"error": str(e)}


_SCHEMA_JSON_PROPERTY = {
    "type": "string",
    "description": "Form builder schema as JSON text ({\"sections\": [...]})",
}

_DATA_PROPERTY = {
    "type": "object",
    "description": "Submission data keyed by field name",
}


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "validate_form_schema",
            "description": "Check a form builder schema. Returns valid, the first error verbatim, and non-blocking warnings.",
            "inputSchema": {
                "type": "object",
                "properties": {"schema_json": _SCHEMA_JSON_PROPERTY},
                "required": ["schema_json"],
            },
        },
        {
            "name": "format_form_json",
            "description": "Pretty-print form schema JSON. The text must be valid JSON but need not be a valid schema.",
            "inputSchema": {
                "type": "object",
                "properties": {"schema_json": _SCHEMA_JSON_PROPERTY},
                "required": ["schema_json"],
            },
        },
        {
            "name": "calculate_form_price",
            "description": "Compute option charges for submitted data. Percentage charges are taken of base_price.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "schema_json": _SCHEMA_JSON_PROPERTY,
                    "data": _DATA_PROPERTY,
                    "base_price": {
                        "type": "number",
                        "description": "Product base price",
                        "default": 0,
                    },
                },
                "required": ["schema_json", "data"],
            },
        },
        {
            "name": "validate_form_data",
            "description": "Validate submitted data against every field of the schema.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "schema_json": _SCHEMA_JSON_PROPERTY,
                    "data": _DATA_PROPERTY,
                },
                "required": ["schema_json", "data"],
            },
        },
        {
            "name": "summarize_form_data",
            "description": "Summarize submitted data as label/value rows grouped by section.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "schema_json": _SCHEMA_JSON_PROPERTY,
                    "data": _DATA_PROPERTY,
                    "show_empty": {"type": "boolean", "default": False},
                    "compact": {"type": "boolean", "default": False},
                },
                "required": ["schema_json", "data"],
            },
        },
    ]
