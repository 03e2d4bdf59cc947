"""Configuration module -- exports Settings, ItemErrorPolicy and load_config."""

from liveshows.config.loader import load_config
from liveshows.config.settings import ItemErrorPolicy, Settings

__all__ = ["ItemErrorPolicy", "Settings", "load_config"]
