# config_manager/main.py
from pydantic import BaseModel, Field

from .system import ServerConfig


class Config(BaseModel):
    """
    Main configuration for the application.
    """

    time_server: ServerConfig = Field(default_factory=ServerConfig, alias="time_server") # 时间服务器配置

    model_config = {"populate_by_name": True}
