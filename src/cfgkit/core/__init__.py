"""Core types, errors, logging protocol and the provider contract."""

from .errors import (
    CodecError,
    ConfigError,
    ConfigErrorCode,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
)
from .logger import Logger, NullLogger
from .provider import ConfigProvider
from .types import ConfigStore, ProviderOptions, SectionData

__all__ = [
    "CodecError",
    "ConfigError",
    "ConfigErrorCode",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigWriteError",
    "ConfigProvider",
    "ConfigStore",
    "Logger",
    "NullLogger",
    "ProviderOptions",
    "SectionData",
]
