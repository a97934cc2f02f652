"""
MCP (Model Context Protocol) Server Package

Tools and the widget resource a chat client uses to drive and render the
todo list. The wire protocol is handled by the official ``mcp`` SDK.
"""
