"""Codec protocol translating between file text and section data."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Tuple


class Codec(Protocol):
    """Protocol for text formats holding sectioned key/value data.

    Attributes:
        name: Short format name used in diagnostics.
        suffixes: File suffixes handled by this codec.
    """

    name: str
    suffixes: Tuple[str, ...]

    def decode(self, text: str) -> Mapping[str, Any]:
        """Parse text into a section -> key -> value mapping.

        Top-level entries that are not mappings may be present; callers
        decide what to do with them.

        Raises:
            CodecError: If the text is not well-formed.
        """
        ...

    def encode(self, store: Mapping[str, Mapping[str, str]]) -> str:
        """Serialize a store back into text."""
        ...
