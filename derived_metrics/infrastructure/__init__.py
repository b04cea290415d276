"""Infrastructure: configuration and logging."""

from .config import EngineSettings, get_settings, load_env_file
from .logging import configure_logging

__all__ = ["EngineSettings", "get_settings", "load_env_file", "configure_logging"]
