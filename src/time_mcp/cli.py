# 主程序执行文件
import sys
import argparse
import asyncio
from typing import List, Optional

from loguru import logger

from . import __version__
from .config_manager import Config, ServerConfig, read_yaml, validate_config
from .mcpp import APP_NAME, TimeServer
from .service import TimeService


def init_logger(console_log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    logger.remove()
    # Console output goes to stderr; stdout carries the stdio transport
    logger.add(
        sys.stderr,
        level=console_log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | {message}",
        colorize=True,
    )

    if log_file:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="30 days",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message} | {extra}",
            backtrace=True,
            diagnose=True,
        )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="time-mcp-server", description=APP_NAME)
    parser.add_argument("-t", "--transport", choices=["stdio", "sse"], help="Transport (default: stdio)")
    parser.add_argument("-l", "--local-timezone", dest="local_timezone", help="IANA zone used when a call omits one")
    parser.add_argument("-p", "--port", type=int, help="SSE port (default: 8080)")
    parser.add_argument("--host", help="SSE host (default: 127.0.0.1)")
    parser.add_argument("-c", "--config", help="YAML config file (key: time_server)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("-v", "--version", action="version", version=f"{APP_NAME} {__version__}")
    return parser.parse_args(argv)


def load_server_config(args: argparse.Namespace) -> ServerConfig:
    """Merge defaults, the optional YAML file and CLI flags (highest wins)."""
    config: Config = validate_config(read_yaml(args.config) if args.config else {})
    overrides = {
        key: value
        for key, value in (
            ("transport", args.transport),
            ("local_timezone", args.local_timezone),
            ("port", args.port),
            ("host", args.host),
        )
        if value is not None
    }
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    if not overrides:
        return config.time_server
    return ServerConfig.model_validate({**config.time_server.model_dump(), **overrides})


@logger.catch(reraise=True)
def run(server_config: ServerConfig) -> None:
    init_logger(server_config.log_level, server_config.log_file)
    logger.info(f"{APP_NAME}, version v{__version__}")

    service = TimeService(local_timezone=server_config.local_timezone)
    server = TimeServer(service)

    try:
        if server_config.transport == "sse":
            asyncio.run(server.run_sse(server_config.host, server_config.port, server_config.log_level))
        else:
            asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Time server stopped")


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    run(load_server_config(args))
