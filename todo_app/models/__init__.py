"""Data models."""
from todo_app.models.task import Task

__all__ = ["Task"]
