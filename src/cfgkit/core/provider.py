"""Provider protocol shared by every configuration backend."""

from __future__ import annotations

from typing import Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class ConfigProvider(Protocol):
    """Protocol defining the interface for configuration providers.

    Consumers depend on this protocol only, so a file-backed provider and
    an in-memory provider can be swapped without changing calling code.
    """

    def get(self, section: str, key: str) -> Optional[str]:
        """Get a single value.

        Args:
            section: Section name.
            key: Key name within the section.

        Returns:
            The value, or None if the section or key does not exist.
        """
        ...

    def get_section(self, section: str) -> Optional[Dict[str, str]]:
        """Get a copy of one section.

        Args:
            section: Section name.

        Returns:
            Key/value copy of the section, or None if it does not exist.
        """
        ...

    def set(self, section: str, key: str, value: str) -> None:
        """Set a value, creating the section if needed.

        Args:
            section: Section name.
            key: Key name within the section.
            value: Value to store.
        """
        ...

    def save(self) -> None:
        """Persist the current values to the backing source."""
        ...

    def refresh(self) -> None:
        """Discard current values and reload them from the backing source."""
        ...

    def get_all_sections(self) -> Dict[str, Dict[str, str]]:
        """Get a copy of every section.

        Returns:
            Mapping of section name to key/value copy.
        """
        ...
