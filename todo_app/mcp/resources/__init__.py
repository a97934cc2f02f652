"""Static MCP resources."""
from todo_app.mcp.resources.todo_widget import WidgetLoadError, WidgetResource, load_widget

__all__ = ["WidgetLoadError", "WidgetResource", "load_widget"]
