"""
Complete Todo MCP Tool

Marks a todo item as completed in the shared task store.
"""

from todo_app.mcp.base_tool import BaseMCPTool, widget_tool_meta
from todo_app.schemas.task import CompleteTodoInput, TodoList, TodoReply
from todo_app.services.task_store import TaskStore


class CompleteTodoTool(BaseMCPTool):
    """MCP Tool for completing todo items"""

    async def execute(self, id: str = None, **kwargs) -> TodoReply:
        """
        Mark a todo item as completed

        An id that matches no task leaves the list unchanged and is still
        reported as completed.

        Args:
            id: Id of the todo item, trimmed before use

        Returns:
            Confirmation message and the updated task list
        """
        self.log_tool_invocation("complete_todo", {"id": id})

        task_id = self.clean_argument(id)
        if not task_id:
            return self.reply("Missing id.")

        self.store.mark_complete(task_id)
        return self.reply(f'Completed "{task_id}".')


def register_complete_todo_tool(mcp_server, store: TaskStore):
    """Register complete_todo tool with MCP server"""
    from todo_app.mcp.server import MCPTool

    tool = MCPTool(
        name="complete_todo",
        title="Complete todo",
        description="Marks a todo item as complete.",
        parameters=CompleteTodoInput.model_json_schema(),
        output_schema=TodoList.model_json_schema(),
        handler=lambda **kwargs: CompleteTodoTool(store).execute(**kwargs),
        meta=widget_tool_meta("Completing todo", "Completed todo"),
    )

    mcp_server.register_tool(tool)
