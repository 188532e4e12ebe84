from .loader import load_settings
from .types import ConfigError, RunConfig, UnsupportedConfigFormatError

__all__ = ["load_settings", "RunConfig", "ConfigError", "UnsupportedConfigFormatError"]
