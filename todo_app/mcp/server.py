"""
MCP Server Implementation

This module keeps the registry of todo tools and the widget resource, and
binds it onto the official SDK's low-level server so the Streamable HTTP
transport can dispatch JSON-RPC calls to it.

A new server is built for every HTTP request; only the TaskStore passed in is
shared between them.
"""

from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass, field
import logging

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.shared.exceptions import McpError

from todo_app.mcp.resources.todo_widget import WidgetResource
from todo_app.schemas.task import TodoReply
from todo_app.services.task_store import TaskStore

logger = logging.getLogger(__name__)

SERVER_NAME = "todo-app"
SERVER_VERSION = "0.1.0"


@dataclass
class MCPTool:
    """MCP Tool definition"""
    name: str
    description: str
    parameters: Dict[str, Any]
    handler: Callable
    title: Optional[str] = None
    output_schema: Optional[Dict[str, Any]] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_sdk_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.parameters,
            outputSchema=self.output_schema,
            _meta=self.meta or None,
        )


class MCPServer:
    """
    MCP Server for the todo list

    Holds the tools and resources a client can reach and turns them into a
    low-level SDK server with ``to_sdk_server``.
    """

    def __init__(self, name: str = SERVER_NAME, version: str = SERVER_VERSION):
        self.tools: Dict[str, MCPTool] = {}
        self.resources: Dict[str, WidgetResource] = {}
        self.name = name
        self.version = version
        logger.debug(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.debug(f"Registered MCP tool: {tool.name}")

    def register_resource(self, resource: WidgetResource):
        """Register a static resource under its URI"""
        self.resources[resource.uri] = resource
        logger.debug(f"Registered MCP resource: {resource.uri}")

    def get_tool(self, name: str) -> MCPTool:
        """Get a registered tool by name"""
        if name not in self.tools:
            raise ValueError(f"Tool {name} not found. Available tools: {list(self.tools.keys())}")
        return self.tools[name]

    def get_resource(self, uri: str) -> WidgetResource:
        """Get a registered resource by URI"""
        if uri not in self.resources:
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=f"Unknown resource: {uri}"))
        return self.resources[uri]

    def list_tools(self) -> List[str]:
        """List all registered tool names"""
        return list(self.tools.keys())

    async def invoke_tool(self, tool_name: str, /, **kwargs) -> TodoReply:
        """
        Invoke a tool with arguments

        Args:
            tool_name: Name of the tool to invoke
            **kwargs: Tool arguments

        Returns:
            Tool reply

        Raises:
            ValueError: If tool not found
        """
        tool = self.get_tool(tool_name)

        logger.info(f"Invoking MCP tool: {tool_name}")

        try:
            result = await tool.handler(**kwargs)
            logger.info(f"Tool {tool_name} executed successfully")
            return result
        except Exception as e:
            logger.error(f"Tool {tool_name} failed: {str(e)}")
            raise

    def get_tool_schemas(self) -> Dict[str, Dict[str, Any]]:
        """Get JSON schemas for all registered tools"""
        return {
            name: {
                "name": tool.name,
                "description": tool.description,
                "parameters": tool.parameters
            }
            for name, tool in self.tools.items()
        }

    def to_sdk_server(self) -> Server:
        """Bind the registered tools and resources onto a low-level SDK server"""
        server = Server(self.name, version=self.version)

        @server.list_tools()
        async def list_tools() -> List[types.Tool]:
            return [tool.to_sdk_tool() for tool in self.tools.values()]

        @server.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]):
            reply = await self.invoke_tool(name, **(arguments or {}))
            content = [types.TextContent(type="text", text=reply.message)] if reply.message else []
            return content, reply.structured_content()

        @server.list_resources()
        async def list_resources() -> List[types.Resource]:
            return [
                types.Resource(name=resource.name, uri=resource.uri, mimeType=resource.mime_type)
                for resource in self.resources.values()
            ]

        # Registered directly so the contents can carry _meta
        async def read_resource(request: types.ReadResourceRequest) -> types.ServerResult:
            resource = self.get_resource(str(request.params.uri))
            return types.ServerResult(
                types.ReadResourceResult(
                    contents=[
                        types.TextResourceContents(
                            uri=resource.uri,
                            mimeType=resource.mime_type,
                            text=resource.html,
                            _meta=resource.meta,
                        )
                    ]
                )
            )

        server.request_handlers[types.ReadResourceRequest] = read_resource
        return server


def create_todo_server(store: TaskStore, widget: WidgetResource) -> Server:
    """Build a fresh SDK server whose tools close over the shared store"""
    from todo_app.mcp.tools import register_add_todo_tool, register_complete_todo_tool

    mcp_server = MCPServer()
    mcp_server.register_resource(widget)
    register_add_todo_tool(mcp_server, store)
    register_complete_todo_tool(mcp_server, store)
    return mcp_server.to_sdk_server()
