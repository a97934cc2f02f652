"""Task model for the in-memory todo list."""
from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """Task entity representing a todo item."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(min_length=1)
    completed: bool = False
