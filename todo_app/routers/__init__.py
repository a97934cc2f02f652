"""API routers."""
from todo_app.routers.mcp import MCPEndpoint, add_mcp_route

__all__ = ["MCPEndpoint", "add_mcp_route"]
