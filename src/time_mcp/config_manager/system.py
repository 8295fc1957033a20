# config_manager/system.py
from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional


class ServerConfig(BaseModel):
    """Time server configuration settings."""

    local_timezone: str = Field("", alias="local_timezone") # 空字符串表示自动检测本机时区
    transport: Literal["stdio", "sse"] = Field("stdio", alias="transport") # 传输方式
    host: str = Field("127.0.0.1", alias="host") # SSE 监听地址
    port: int = Field(8080, alias="port") # SSE 端口号
    log_level: str = Field("INFO", alias="log_level") # 控制台日志级别
    log_file: Optional[str] = Field(None, alias="log_file") # 可选的日志文件路径

    model_config = {"populate_by_name": True}

    @field_validator("port")
    @classmethod
    def check_port(cls, port: int) -> int:
        if port < 0 or port > 65535:
            raise ValueError("Port must be between 0 and 65535")
        return port

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, level: str) -> str:
        return level.upper()
