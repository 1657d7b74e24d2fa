"""Config loading and schema."""

from .loader import ConfigLoadError, load_config, read_config_file, resolve_params
from .schema import GenerationParams

__all__ = ["ConfigLoadError", "GenerationParams", "load_config", "read_config_file", "resolve_params"]
