"""Configuration package."""

from src.config.logging import configure_logging, get_logger
from src.config.settings import MewsSettings, Settings, settings

__all__ = ["settings", "Settings", "MewsSettings", "configure_logging", "get_logger"]
