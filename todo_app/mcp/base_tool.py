"""
MCP Base Tool Interface

Provides base functionality for the todo tools:
- Argument presence checks
- Reply shaping (text message + structured task list)
- Invocation logging
"""

from typing import Any, Dict
from abc import ABC, abstractmethod
import logging

from todo_app.schemas.task import TodoReply
from todo_app.services.task_store import TaskStore

logger = logging.getLogger(__name__)

OUTPUT_TEMPLATE_URI = "ui://widget/todo.html"


class BaseMCPTool(ABC):
    """
    Base class for the todo tools

    Every tool operates on the shared TaskStore and answers with the full
    task list, so the widget can re-render from any tool result.
    """

    def __init__(self, store: TaskStore):
        self.store = store

    @staticmethod
    def clean_argument(value: Any) -> str:
        """Trim a string argument; missing values count as empty."""
        if value is None:
            return ""
        return str(value).strip()

    def reply(self, message: str = "") -> TodoReply:
        """Build a reply carrying the current task snapshot."""
        return TodoReply(message=message, tasks=self.store.snapshot())

    def log_tool_invocation(self, tool_name: str, params: Dict[str, Any]) -> None:
        logger.info(f"MCP Tool Invocation: {tool_name} | Params: {params}")

    @abstractmethod
    async def execute(self, **kwargs) -> TodoReply:
        """
        Execute the tool logic

        Must be implemented by subclasses

        Args:
            **kwargs: Tool-specific arguments

        Returns:
            Reply message and task snapshot
        """


def widget_tool_meta(invoking: str, invoked: str) -> Dict[str, Any]:
    """Tool metadata telling the client which widget renders the result."""
    return {
        "openai/outputTemplate": OUTPUT_TEMPLATE_URI,
        "openai/toolInvocation/invoking": invoking,
        "openai/toolInvocation/invoked": invoked,
    }
