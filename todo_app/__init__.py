"""Todo list MCP server with a ChatGPT widget resource."""

__version__ = "0.1.0"
