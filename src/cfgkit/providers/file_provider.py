"""File-backed configuration provider."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from ..codecs import Codec, codec_for_path
from ..core.errors import (
    CodecError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
)
from ..core.logger import Logger, NullLogger
from ..core.types import ConfigStore, ProviderOptions, copy_store, normalize_store, stringify


class FileConfigProvider:
    """Provider reading and writing a sectioned configuration file.

    The file is parsed into an in-memory cache when the provider is
    created. Reads and ``set`` work on that cache only; ``save`` writes
    the whole cache back and ``refresh`` throws it away and re-reads the
    file.

    Each instance keeps its own cache. Two providers over the same file
    do not see each other's unsaved changes and there is no locking: the
    last ``save`` wins. Coordinating writers is up to the caller.
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        logger: Optional[Logger] = None,
        codec: Optional[Codec] = None,
    ):
        """Initialize FileConfigProvider and load the file.

        Args:
            file_path: Path to the configuration file, absolute or relative
                to the current working directory.
            logger: Optional logger for diagnostics. Silent when omitted.
            codec: Optional codec; chosen from the file suffix when omitted.

        Raises:
            ConfigFileNotFoundError: If the file does not exist.
            ConfigReadError: If the file cannot be read.
            ConfigParseError: If the file content cannot be parsed.
        """
        self._file_path = Path(file_path).expanduser().resolve()
        self._logger: Logger = logger if logger is not None else NullLogger()
        self._codec: Codec = codec if codec is not None else codec_for_path(self._file_path)
        self._cache: ConfigStore = {}

        if not self._file_path.exists():
            self._logger.error("Configuration file not found: %s", self._file_path)
            raise ConfigFileNotFoundError(
                f"Configuration file not found: {self._file_path}",
                file_path=self._file_path,
            )

        self.refresh()

    @classmethod
    def from_options(cls, options: ProviderOptions) -> "FileConfigProvider":
        """Create a provider from a ProviderOptions instance."""
        return cls(options.file_path, logger=options.logger, codec=options.codec)

    @property
    def file_path(self) -> Path:
        """Resolved absolute path of the managed file."""
        return self._file_path

    @property
    def codec(self) -> Codec:
        return self._codec

    def get(self, section: str, key: str) -> Optional[str]:
        values = self._cache.get(section)
        if values is None:
            return None
        return values.get(key)

    def get_section(self, section: str) -> Optional[Dict[str, str]]:
        values = self._cache.get(section)
        return dict(values) if values is not None else None

    def set(self, section: str, key: str, value: str) -> None:
        self._cache.setdefault(section, {})[key] = stringify(value)
        self._logger.info("Set config value %s.%s = %r", section, key, value)

    def get_all_sections(self) -> Dict[str, Dict[str, str]]:
        return copy_store(self._cache)

    def save(self) -> None:
        """Write the whole cache to the file.

        The cache is not modified. If the write fails the state of the
        file on disk is unknown.

        Raises:
            ConfigWriteError: If serialization or the write fails.
        """
        try:
            text = self._codec.encode(self._cache)
        except (ValueError, TypeError) as exc:
            self._logger.error("Failed to serialize configuration for %s: %s", self._file_path, exc)
            raise ConfigWriteError(
                f"Failed to serialize configuration: {exc}",
                file_path=self._file_path,
                original_error=exc,
            ) from exc

        try:
            with open(self._file_path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as exc:
            self._logger.error("Failed to save configuration to %s: %s", self._file_path, exc)
            raise ConfigWriteError(
                f"Failed to save configuration: {exc}",
                file_path=self._file_path,
                original_error=exc,
            ) from exc

        self._logger.info("Configuration saved to %s", self._file_path)

    def refresh(self) -> None:
        """Discard the cache and reload it from the file.

        Raises:
            ConfigFileNotFoundError: If the file has been removed.
            ConfigReadError: If the file cannot be read.
            ConfigParseError: If the file content cannot be parsed.
        """
        text = self._read_text()
        try:
            decoded = self._codec.decode(text)
        except CodecError as exc:
            self._logger.error("Failed to parse configuration %s: %s", self._file_path, exc)
            raise ConfigParseError(
                f"Failed to parse configuration: {exc}",
                file_path=self._file_path,
                original_error=exc,
            ) from exc

        dropped = [name for name, values in decoded.items() if not isinstance(values, Mapping)]
        if dropped:
            self._logger.warning(
                "Ignoring entries outside any section in %s: %s", self._file_path, dropped
            )
        self._cache = normalize_store(decoded)
        self._logger.info(
            "Configuration refreshed from %s (sections: %s)",
            self._file_path,
            list(self._cache),
        )

    def _read_text(self) -> str:
        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as exc:
            self._logger.error("Configuration file not found: %s", self._file_path)
            raise ConfigFileNotFoundError(
                f"Configuration file not found: {self._file_path}",
                file_path=self._file_path,
                original_error=exc,
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.error("Failed to read configuration %s: %s", self._file_path, exc)
            raise ConfigReadError(
                f"Failed to read configuration: {exc}",
                file_path=self._file_path,
                original_error=exc,
            ) from exc

    def __repr__(self) -> str:
        return f"FileConfigProvider({str(self._file_path)!r}, codec={self._codec.name!r})"
