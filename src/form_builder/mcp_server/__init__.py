"""
MCP Server module for the form builder.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from form_builder.mcp_server.server import create_mcp_server, create_sse_app, run_mcp_server
from form_builder.mcp_server.tools import call_form_tool, get_mcp_tools

__all__ = [
    "create_mcp_server",
    "create_sse_app",
    "run_mcp_server",
    "call_form_tool",
    "get_mcp_tools",
]
