"""
Configuration management package for the time MCP server.

This package provides configuration management functionality through Pydantic models
and utility functions for loading configurations.
"""

# Import main configuration classes
from .main import Config
from .system import ServerConfig

# Import utility functions
from .utils import (
    read_yaml,
    validate_config,
)

__all__ = [
    # Main configuration classes
    "Config",
    "ServerConfig",

    # Utility functions
    "read_yaml",
    "validate_config",
]
