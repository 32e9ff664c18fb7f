"""Configuration provider implementations.

This package contains the file-backed provider (INI or YAML files) and
the in-memory provider used as a stand-in during tests.
"""

from .file_provider import FileConfigProvider
from .memory_provider import InMemoryConfigProvider

__all__ = [
    "FileConfigProvider",
    "InMemoryConfigProvider",
]
