"""Configuration models."""

from .config import LibraryConfig, load_config, save_config

__all__ = ["LibraryConfig", "load_config", "save_config"]
