"""In-memory configuration provider."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..core.types import ConfigStore, copy_store, normalize_store, stringify


class InMemoryConfigProvider:
    """Provider backed purely by a nested dict held in memory.

    Useful in tests, or anywhere a file system is not available. Seed data
    is copied on the way in and every read hands back copies, so neither
    side can mutate the other.
    """

    def __init__(self, initial: Optional[Mapping[str, Mapping[str, Any]]] = None):
        """Initialize InMemoryConfigProvider.

        Args:
            initial: Optional section -> key -> value data to start with.
        """
        self._store: ConfigStore = normalize_store(initial) if initial else {}

    def get(self, section: str, key: str) -> Optional[str]:
        values = self._store.get(section)
        if values is None:
            return None
        return values.get(key)

    def get_section(self, section: str) -> Optional[Dict[str, str]]:
        values = self._store.get(section)
        return dict(values) if values is not None else None

    def set(self, section: str, key: str, value: str) -> None:
        self._store.setdefault(section, {})[key] = stringify(value)

    def save(self) -> None:
        """Nothing to persist; present for interface compatibility."""

    def refresh(self) -> None:
        """Nothing to reload; present for interface compatibility."""

    def get_all_sections(self) -> Dict[str, Dict[str, str]]:
        return copy_store(self._store)

    def reset(self, new_data: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        """Replace all data, or clear it.

        Args:
            new_data: Data to copy in. When omitted the provider is emptied.
        """
        self._store = normalize_store(new_data) if new_data else {}

    def __repr__(self) -> str:
        return f"InMemoryConfigProvider(sections={list(self._store)!r})"
