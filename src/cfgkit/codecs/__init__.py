"""Text formats for file-backed providers.

The INI codec is the default; YAML files are picked by suffix.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .base import Codec
from .ini_codec import IniCodec
from .yaml_codec import YamlCodec


def codec_for_path(path: Union[str, Path]) -> Codec:
    """Choose a codec based on the file suffix.

    Args:
        path: Configuration file path.

    Returns:
        A YAML codec for ``.yaml``/``.yml`` files, otherwise an INI codec.
    """
    suffix = Path(path).suffix.lower()
    if suffix in YamlCodec.suffixes:
        return YamlCodec()
    return IniCodec()


__all__ = ["Codec", "IniCodec", "YamlCodec", "codec_for_path"]
