#!/usr/bin/env python3
"""
时间查询 MCP 服务器

工具:
- get_current_time: 获取指定时区的当前时间
- convert_time: 将 HH:MM 从源时区转换到目标时区
- parse_natural_time: 解析自然语言时间表达式
"""

import json
import asyncio
from typing import Any, Dict, Optional

from loguru import logger
from mcp.server.models import InitializationOptions
from mcp.server import NotificationOptions, Server
import mcp.types as types

from .. import __version__
from ..errors import TimeServerError
from ..models import ConvertTimeArgs, GetCurrentTimeArgs, ParseNaturalTimeArgs, parse_arguments
from ..service import TimeService

APP_NAME = "Time MCP Server"


class TimeServer:
    def __init__(self, service: TimeService):
        self.server = Server(APP_NAME)
        self.service = service
        self._register_tools()
        logger.info(f"{APP_NAME} v{__version__} ready (local timezone: {service.local_timezone})")

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name="get_current_time",
                description="Get the current time in a specific timezone.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "timezone": {
                            "type": "string",
                            "description": f"IANA timezone (optional, default: {self.service.local_timezone}).",
                        },
                    },
                    "required": [],
                },
            ),
            types.Tool(
                name="convert_time",
                description="Convert a HH:MM time between timezones.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "source_timezone": {"type": "string", "description": "Source IANA timezone"},
                        "time": {"type": "string", "description": "Time in 24-hour format (HH:MM)"},
                        "target_timezone": {"type": "string", "description": "Target IANA timezone"},
                    },
                    "required": ["source_timezone", "time", "target_timezone"],
                },
            ),
            types.Tool(
                name="parse_natural_time",
                description="Parse natural-language expressions (e.g., 'next Friday at noon').",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "expression": {"type": "string", "description": "Natural-language time expression"},
                        "timezone": {"type": "string", "description": "IANA timezone (optional)"},
                    },
                    "required": ["expression"],
                },
            ),
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> list[types.TextContent]:
        """Run a tool and serialize its result. Errors propagate to the caller."""
        try:
            if name == "get_current_time":
                args = parse_arguments(GetCurrentTimeArgs, arguments)
                result = await asyncio.to_thread(self.service.get_current_time, args.timezone)
            elif name == "convert_time":
                args = parse_arguments(ConvertTimeArgs, arguments)
                result = await asyncio.to_thread(
                    self.service.convert_time, args.source_timezone, args.time, args.target_timezone
                )
            elif name == "parse_natural_time":
                args = parse_arguments(ParseNaturalTimeArgs, arguments)
                result = await asyncio.to_thread(self.service.parse_natural, args.expression, args.timezone)
            else:
                raise ValueError(f"Unknown tool: {name}")
        except (TimeServerError, ValueError) as e:
            logger.warning(f"Tool '{name}' failed: {e}")
            raise

        payload = json.dumps(result.model_dump(), indent=2, ensure_ascii=False)
        return [types.TextContent(type="text", text=payload)]

    def _register_tools(self):
        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return self.list_tools()

        # argument models own validation, see parse_arguments
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
            return await self.call_tool(name, arguments)

    def _initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=APP_NAME,
            server_version=__version__,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )

    async def run(self):
        from mcp.server.stdio import stdio_server
        logger.info("Serving over stdio")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream, self._initialization_options())

    def sse_app(self):
        """Starlette app exposing the server over SSE (GET /sse, POST /messages/)."""
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.responses import Response
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request):
            async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
                await self.server.run(read_stream, write_stream, self._initialization_options())
            return Response()

        return Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse, methods=["GET"]),
                Mount("/messages/", app=sse.handle_post_message),
            ]
        )

    async def run_sse(self, host: str, port: int, log_level: str = "info"):
        import uvicorn
        logger.info(f"Serving over SSE on http://{host}:{port}/sse")
        config = uvicorn.Config(self.sse_app(), host=host, port=port, log_level=log_level.lower())
        await uvicorn.Server(config).serve()
