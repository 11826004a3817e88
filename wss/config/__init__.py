"""Configuration module for the wss tool."""

from .config_loader import ConfigLoader
from .tool_settings import ToolSettings

__all__ = ["ConfigLoader", "ToolSettings"]
