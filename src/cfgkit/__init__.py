"""cfgkit - Sectioned key/value configuration library.

Read and update ``section -> key -> value`` configuration through one
provider interface, backed by an INI/YAML file or by memory.
"""

from .core.errors import (
    ConfigError,
    ConfigErrorCode,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
)
from .core.logger import Logger, NullLogger
from .core.provider import ConfigProvider
from .core.types import ProviderOptions
from .providers.file_provider import FileConfigProvider
from .providers.memory_provider import InMemoryConfigProvider

__all__ = [
    "ConfigProvider",
    "FileConfigProvider",
    "InMemoryConfigProvider",
    "ProviderOptions",
    "Logger",
    "NullLogger",
    "ConfigError",
    "ConfigErrorCode",
    "ConfigFileNotFoundError",
    "ConfigReadError",
    "ConfigParseError",
    "ConfigWriteError",
]
