"""In-memory task store shared by every MCP session of the process."""
from typing import List
import threading
import logging

from todo_app.models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered collection of tasks plus the next-id counter.

    Tasks are never removed and ids are never reused. The only mutation after
    creation is marking a task completed.
    """

    ID_PREFIX = "todo-"

    def __init__(self):
        self._tasks: List[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def append(self, title: str) -> Task:
        """Create a task with a fresh id and add it at the end."""
        with self._lock:
            task = Task(id=f"{self.ID_PREFIX}{self._next_id}", title=title, completed=False)
            self._next_id += 1
            self._tasks = [*self._tasks, task]

        logger.info(f"Added task {task.id}")
        return task

    def mark_complete(self, task_id: str) -> None:
        """Mark every task with the given id completed; unknown ids are ignored."""
        with self._lock:
            self._tasks = [
                task.model_copy(update={"completed": True}) if task.id == task_id else task
                for task in self._tasks
            ]

    def snapshot(self) -> List[Task]:
        """Return the current tasks in insertion order."""
        with self._lock:
            return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)
