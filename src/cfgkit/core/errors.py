"""Error taxonomy for configuration providers."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union


class ConfigErrorCode(str, Enum):
    """Stable machine-readable identifiers for provider failures."""

    FILE_NOT_FOUND = "CFGKIT_FILE_NOT_FOUND"
    READ_ERROR = "CFGKIT_READ_ERROR"
    PARSE_ERROR = "CFGKIT_PARSE_ERROR"
    WRITE_ERROR = "CFGKIT_WRITE_ERROR"


class ConfigError(Exception):
    """Base class for provider errors.

    Attributes:
        code: Kind of failure.
        message: Human-readable description.
        file_path: File involved, when there is one.
        original_error: Underlying cause, if any.
    """

    code: ConfigErrorCode

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[Union[str, Path]] = None,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.file_path = Path(file_path) if file_path is not None else None
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Return the error as a plain payload for reporting."""
        return {
            "code": self.code.value,
            "message": self.message,
            "file_path": str(self.file_path) if self.file_path else None,
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConfigFileNotFoundError(ConfigError):
    """Raised when the configuration file does not exist."""

    code = ConfigErrorCode.FILE_NOT_FOUND


class ConfigReadError(ConfigError):
    """Raised when the configuration file exists but cannot be read."""

    code = ConfigErrorCode.READ_ERROR


class ConfigParseError(ConfigError):
    """Raised when file content is not in the expected format."""

    code = ConfigErrorCode.PARSE_ERROR


class ConfigWriteError(ConfigError):
    """Raised when the configuration cannot be written back to disk."""

    code = ConfigErrorCode.WRITE_ERROR


class CodecError(ValueError):
    """Raised by a codec when text cannot be interpreted."""
