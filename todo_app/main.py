"""Main FastAPI application for the todo MCP server."""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_app import __version__
from todo_app.config import Settings, get_settings
from todo_app.mcp.resources.todo_widget import WidgetLoadError, load_widget
from todo_app.middleware.cors import add_cors_middleware
from todo_app.routers.mcp import add_mcp_route
from todo_app.services.task_store import TaskStore
from todo_app.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Plain-text 404 for every path other than the MCP endpoint."""
    if exc.status_code == 404:
        return PlainTextResponse("Not found", status_code=404)
    return await http_exception_handler(request, exc)


def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """
    Build the application.

    The widget document is loaded here; a missing document aborts startup
    with WidgetLoadError.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    try:
        widget = load_widget(settings.widget_path)
    except WidgetLoadError as e:
        logger.critical("Widget document unavailable, refusing to start", error=str(e))
        raise

    store = store if store is not None else TaskStore()

    # Only the exact MCP path is served: no docs routes, no trailing-slash redirects
    app = FastAPI(
        title="Todo MCP Server",
        description="Todo list exposed as MCP tools with a widget resource",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.task_store = store
    app.state.widget = widget

    add_cors_middleware(app, settings.mcp_path)
    add_mcp_route(app, settings.mcp_path, store, widget)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    logger.info("Application created", mcp_path=settings.mcp_path, environment=settings.environment)
    return app


def run(settings: Optional[Settings] = None):
    """Serve the application with uvicorn."""
    import uvicorn

    settings = settings or get_settings()
    app = create_app(settings)
    logger.info(f"MCP server listening on http://localhost:{settings.port}{settings.mcp_path}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
