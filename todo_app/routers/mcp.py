"""MCP endpoint: one stateless Streamable HTTP exchange per request."""
from starlette.responses import PlainTextResponse
from starlette.types import Message, Receive, Scope, Send

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from todo_app.mcp.resources.todo_widget import WidgetResource
from todo_app.mcp.server import create_todo_server
from todo_app.services.task_store import TaskStore
from todo_app.utils.logger import get_logger

logger = get_logger(__name__)

MCP_METHODS = ["GET", "POST", "DELETE"]


def _error_message(exc: BaseException) -> str:
    """Message of the first leaf exception, unwrapping task group errors."""
    while getattr(exc, "exceptions", None):
        exc = exc.exceptions[0]
    return str(exc) or exc.__class__.__name__


class MCPEndpoint:
    """
    ASGI endpoint for the MCP path

    Builds a fresh SDK server and stateless session manager for each request
    so no session id survives between requests. The TaskStore is the only
    state shared across requests.
    """

    def __init__(self, store: TaskStore, widget: WidgetResource):
        self.store = store
        self.widget = widget

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            server = create_todo_server(self.store, self.widget)
            session_manager = StreamableHTTPSessionManager(
                app=server,
                event_store=None,
                json_response=True,
                stateless=True,
            )
            async with session_manager.run():
                await session_manager.handle_request(scope, receive, tracking_send)
        except Exception as e:
            logger.exception("MCP request failed", method=scope.get("method"), path=scope.get("path"))
            if response_started:
                raise
            response = PlainTextResponse(f"Server error: {_error_message(e)}", status_code=500)
            await response(scope, receive, tracking_send)


def add_mcp_route(app, path: str, store: TaskStore, widget: WidgetResource):
    """Mount the MCP endpoint on the application at the given path."""
    app.add_route(path, MCPEndpoint(store, widget), methods=MCP_METHODS)
