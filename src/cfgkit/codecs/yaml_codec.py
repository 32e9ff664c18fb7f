from __future__ import annotations

from typing import Any, Dict, Mapping

import yaml

from ..core.errors import CodecError
from ..core.types import copy_store


class YamlCodec:
    """Two-level YAML mapping: sections at the top, key/value pairs below."""

    name = "yaml"
    suffixes = (".yaml", ".yml")

    def decode(self, text: str) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CodecError(f"Invalid YAML: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise CodecError(
                f"YAML document must be a mapping of sections, got {type(data).__name__}"
            )
        return data

    def encode(self, store: Mapping[str, Mapping[str, str]]) -> str:
        # plain dicts only; safe_dump refuses other mapping types
        return yaml.safe_dump(
            copy_store(store),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
