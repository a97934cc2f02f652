# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from todo_app.config import Settings
from todo_app.main import create_app
from todo_app.mcp.resources.todo_widget import WidgetResource
from todo_app.services.task_store import TaskStore

WIDGET_HTML = "<div id='todo-root'></div>"


@pytest.fixture()
def widget_path(tmp_path: Path) -> Path:
    path = tmp_path / "todo-widget.html"
    path.write_text(WIDGET_HTML, encoding="utf-8")
    return path


@pytest.fixture()
def settings(widget_path: Path) -> Settings:
    return Settings(port=8787, host="127.0.0.1", mcp_path="/mcp", widget_path=widget_path)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def widget() -> WidgetResource:
    return WidgetResource(html=WIDGET_HTML)


@pytest.fixture()
def client(settings: Settings, store: TaskStore) -> TestClient:
    """HTTP client against an app sharing the ``store`` fixture."""
    return TestClient(create_app(settings, store=store))
