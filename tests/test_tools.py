# tests/test_tools.py

from __future__ import annotations

import pytest

from todo_app.mcp.server import MCPServer
from todo_app.mcp.tools import (
    AddTodoTool,
    CompleteTodoTool,
    register_add_todo_tool,
    register_complete_todo_tool,
)
from todo_app.services.task_store import TaskStore


def _as_dicts(reply):
    return [t.model_dump() for t in reply.tasks]


@pytest.mark.asyncio
async def test_add_todo_scenario(store: TaskStore) -> None:
    reply = await AddTodoTool(store).execute(title="Buy milk")

    assert reply.message == 'Added "Buy milk".'
    assert _as_dicts(reply) == [{"id": "todo-1", "title": "Buy milk", "completed": False}]


@pytest.mark.asyncio
async def test_add_todo_trims_title(store: TaskStore) -> None:
    reply = await AddTodoTool(store).execute(title="  Buy milk \n")

    assert reply.message == 'Added "Buy milk".'
    assert reply.tasks[0].title == "Buy milk"


@pytest.mark.asyncio
@pytest.mark.parametrize("title", ["  ", "", None])
async def test_add_todo_blank_title_leaves_store_unchanged(store: TaskStore, title) -> None:
    store.append("existing")

    reply = await AddTodoTool(store).execute(title=title)

    assert reply.message == "Missing title."
    assert [t.title for t in reply.tasks] == ["existing"]
    assert len(store) == 1


@pytest.mark.asyncio
async def test_complete_todo_scenario(store: TaskStore) -> None:
    await AddTodoTool(store).execute(title="Buy milk")

    reply = await CompleteTodoTool(store).execute(id="todo-1")

    assert reply.message == 'Completed "todo-1".'
    assert _as_dicts(reply) == [{"id": "todo-1", "title": "Buy milk", "completed": True}]


@pytest.mark.asyncio
async def test_complete_todo_unknown_id_still_reports_success(store: TaskStore) -> None:
    await AddTodoTool(store).execute(title="Buy milk")

    reply = await CompleteTodoTool(store).execute(id="todo-42")

    assert reply.message == 'Completed "todo-42".'
    assert _as_dicts(reply) == [{"id": "todo-1", "title": "Buy milk", "completed": False}]


@pytest.mark.asyncio
async def test_complete_todo_blank_id(store: TaskStore) -> None:
    reply = await CompleteTodoTool(store).execute(id="   ")

    assert reply.message == "Missing id."
    assert reply.tasks == []


@pytest.mark.asyncio
async def test_complete_todo_twice_same_state(store: TaskStore) -> None:
    tool = CompleteTodoTool(store)
    store.append("a")

    first = await tool.execute(id="todo-1")
    second = await tool.execute(id=" todo-1 ")

    assert second.message == 'Completed "todo-1".'
    assert _as_dicts(first) == _as_dicts(second)


@pytest.mark.asyncio
async def test_registry_invokes_registered_tools(store: TaskStore) -> None:
    registry = MCPServer()
    register_add_todo_tool(registry, store)
    register_complete_todo_tool(registry, store)

    assert registry.list_tools() == ["add_todo", "complete_todo"]

    reply = await registry.invoke_tool("add_todo", title="x")
    assert reply.message == 'Added "x".'

    with pytest.raises(ValueError):
        await registry.invoke_tool("delete_todo", id="todo-1")


def test_registry_tool_schemas_require_non_empty_strings(store: TaskStore) -> None:
    registry = MCPServer()
    register_add_todo_tool(registry, store)
    register_complete_todo_tool(registry, store)

    schemas = registry.get_tool_schemas()

    add_params = schemas["add_todo"]["parameters"]
    assert add_params["required"] == ["title"]
    assert add_params["properties"]["title"]["type"] == "string"
    assert add_params["properties"]["title"]["minLength"] == 1

    complete_params = schemas["complete_todo"]["parameters"]
    assert complete_params["required"] == ["id"]
    assert complete_params["properties"]["id"]["minLength"] == 1
