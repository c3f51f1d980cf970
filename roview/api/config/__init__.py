"""Config API module."""

from .HandlerConfig import HandlerConfig
from .LogConfig import LogConfig
from .RoConfig import RoConfig

__all__ = ["HandlerConfig", "LogConfig", "RoConfig"]
