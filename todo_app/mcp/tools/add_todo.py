"""
Add Todo MCP Tool

Creates a new todo item in the shared task store.
"""

from todo_app.mcp.base_tool import BaseMCPTool, widget_tool_meta
from todo_app.schemas.task import AddTodoInput, TodoList, TodoReply
from todo_app.services.task_store import TaskStore


class AddTodoTool(BaseMCPTool):
    """MCP Tool for adding todo items"""

    async def execute(self, title: str = None, **kwargs) -> TodoReply:
        """
        Add a new todo item

        Args:
            title: Todo title, trimmed before use

        Returns:
            Confirmation message and the updated task list
        """
        self.log_tool_invocation("add_todo", {"title": title})

        title = self.clean_argument(title)
        if not title:
            return self.reply("Missing title.")

        task = self.store.append(title)
        return self.reply(f'Added "{task.title}".')


def register_add_todo_tool(mcp_server, store: TaskStore):
    """Register add_todo tool with MCP server"""
    from todo_app.mcp.server import MCPTool

    tool = MCPTool(
        name="add_todo",
        title="Add todo",
        description="Creates a todo item with the given title.",
        parameters=AddTodoInput.model_json_schema(),
        output_schema=TodoList.model_json_schema(),
        handler=lambda **kwargs: AddTodoTool(store).execute(**kwargs),
        meta=widget_tool_meta("Adding todo", "Added todo"),
    )

    mcp_server.register_tool(tool)
