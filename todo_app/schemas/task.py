"""Tool argument and reply schemas for the todo MCP tools."""
from pydantic import BaseModel, Field
from typing import List

from todo_app.models.task import Task


class AddTodoInput(BaseModel):
    """Arguments accepted by add_todo."""
    title: str = Field(..., min_length=1, description="Title of the todo item")


class CompleteTodoInput(BaseModel):
    """Arguments accepted by complete_todo."""
    id: str = Field(..., min_length=1, description="Id of the todo item to complete")


class TodoList(BaseModel):
    """Structured content returned by every todo tool."""
    tasks: List[Task]


class TodoReply(BaseModel):
    """Message plus task snapshot produced by a tool handler."""
    message: str = ""
    tasks: List[Task] = []

    def structured_content(self) -> dict:
        return TodoList(tasks=self.tasks).model_dump(mode="json")
