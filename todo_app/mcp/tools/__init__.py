"""Todo MCP tools."""
from todo_app.mcp.tools.add_todo import AddTodoTool, register_add_todo_tool
from todo_app.mcp.tools.complete_todo import CompleteTodoTool, register_complete_todo_tool

__all__ = [
    "AddTodoTool",
    "CompleteTodoTool",
    "register_add_todo_tool",
    "register_complete_todo_tool",
]
