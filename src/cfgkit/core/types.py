"""Type definitions for the cfgkit configuration store."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

if TYPE_CHECKING:
    from ..codecs.base import Codec
    from .logger import Logger

# section -> key -> value
SectionData = Dict[str, str]
ConfigStore = Dict[str, SectionData]


@dataclass(frozen=True)
class ProviderOptions:
    """Construction options for a file-backed provider.

    Attributes:
        file_path: Path to the configuration file, absolute or relative to
            the current working directory.
        logger: Optional logger receiving load/save/refresh/set diagnostics.
        codec: Optional codec; inferred from the file suffix when omitted.
    """

    file_path: Union[str, Path]
    logger: Optional["Logger"] = None
    codec: Optional["Codec"] = None


def stringify(value: Any) -> str:
    """Coerce a parsed leaf value to its string form.

    Args:
        value: Value produced by a codec.

    Returns:
        The string stored in the cache.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        # nested structures are kept as compact JSON
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def normalize_store(data: Mapping[str, Any]) -> ConfigStore:
    """Build a fresh store from decoded data.

    Only two-level section -> key -> value shapes are kept: top-level
    entries that are not mappings are dropped.

    Args:
        data: Mapping decoded from text, or seed data supplied by a caller.

    Returns:
        A new store with every leaf coerced to a string.
    """
    store: ConfigStore = {}
    for section, values in data.items():
        if not isinstance(values, Mapping):
            continue
        store[str(section)] = {str(k): stringify(v) for k, v in values.items()}
    return store


def copy_store(store: Mapping[str, Mapping[str, str]]) -> ConfigStore:
    return {section: dict(values) for section, values in store.items()}
