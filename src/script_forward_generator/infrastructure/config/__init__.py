"""Infrastructure configuration module."""

from .application_config import Config
from .generator_config import DEFAULT_SETTINGS, GeneratorSettings, get_settings

__all__ = ["Config", "DEFAULT_SETTINGS", "GeneratorSettings", "get_settings"]
