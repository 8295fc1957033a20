from .time_server import APP_NAME, TimeServer

__all__ = ["APP_NAME", "TimeServer"]
