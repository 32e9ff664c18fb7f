from __future__ import annotations

import configparser
import io
from typing import Any, Dict, Mapping

from ..core.errors import CodecError

# Header injected in front of the text so keys above the first section parse.
_ROOT_SECTION = "\x00root"
# Keeps configparser from treating a literal [DEFAULT] section specially.
_NO_DEFAULTS = "\x00defaults"

# Key starts that read back as comments or section headers.
_KEY_PREFIXES = frozenset("#;[")
_KEY_FORBIDDEN = frozenset("=:\r\n")
_LINE_BREAKS = frozenset("\r\n")


class IniCodec:
    """INI text format: ``[section]`` headers followed by ``key = value`` lines."""

    name = "ini"
    suffixes = (".ini", ".cfg", ".conf")

    def _parser(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=False,
            allow_no_value=True,
            default_section=_NO_DEFAULTS,
        )
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        return parser

    def decode(self, text: str) -> Dict[str, Any]:
        parser = self._parser()
        try:
            parser.read_string(f"[{_ROOT_SECTION}]\n{text}", source="<ini>")
        except configparser.Error as exc:
            raise CodecError(str(exc)) from exc

        data: Dict[str, Any] = {}
        for section in parser.sections():
            values = dict(parser.items(section, raw=True))
            if section == _ROOT_SECTION:
                # keys outside any section stay top-level scalars
                data.update(values)
            else:
                data[section] = values
        return data

    def _check_encodable(self, store: Mapping[str, Mapping[str, str]]) -> None:
        """Reject names and values that would not read back unchanged.

        Raises:
            CodecError: On the first section, key or value that cannot be
                written as a plain INI line.
        """
        for section, values in store.items():
            if not section or _LINE_BREAKS.intersection(section):
                raise CodecError(f"Section name {section!r} cannot be written to INI")
            for key, value in values.items():
                if (
                    not key
                    or key != key.strip()
                    or key[0] in _KEY_PREFIXES
                    or _KEY_FORBIDDEN.intersection(key)
                ):
                    raise CodecError(f"Key {key!r} in section {section!r} cannot be written to INI")
                if value != value.strip() or _LINE_BREAKS.intersection(value):
                    raise CodecError(
                        f"Value of {section}.{key} cannot be written to INI: {value!r}"
                    )

    def encode(self, store: Mapping[str, Mapping[str, str]]) -> str:
        self._check_encodable(store)
        parser = self._parser()
        buf = io.StringIO()
        try:
            for section, values in store.items():
                parser.add_section(section)
                for key, value in values.items():
                    parser.set(section, key, value)
            parser.write(buf, space_around_delimiters=True)
        except configparser.Error as exc:
            raise CodecError(str(exc)) from exc
        return buf.getvalue()
