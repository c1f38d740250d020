"""Java-style ``.properties`` files as a pydantic-settings source."""

import logging
from pathlib import Path
from typing import Any

from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _logical_lines(text: str):
    """Yield logical lines, joining backslash continuations and dropping comments."""
    pending = None
    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue

        # An odd number of trailing backslashes continues the line.
        trailing = len(line) - len(line.rstrip("\\"))
        continued = trailing % 2 == 1
        if continued:
            line = line[:-1]

        pending = line if pending is None else pending + line
        if not continued:
            yield pending
            pending = None

    if pending is not None:
        yield pending


def _unescape(value: str) -> str:
    out = []
    i = 0
    while i < len(value):
        char = value[i]
        if char != "\\" or i + 1 == len(value):
            out.append(char)
            i += 1
            continue

        nxt = value[i + 1]
        if nxt == "u":
            digits = value[i + 2:i + 6]
            if len(digits) != 4:
                raise ValueError(f"Malformed \\uXXXX escape: {value[i:i + 6]!r}")
            out.append(chr(int(digits, 16)))
            i += 6
        else:
            out.append(_ESCAPES.get(nxt, nxt))
            i += 2
    return "".join(out)


def _split_key_value(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        # Whitespace may be followed by one explicit separator.
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse the contents of a ``.properties`` file.

    Args:
        text: File contents

    Returns:
        Mapping of property keys to values. Later duplicates win.
    """

    properties: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_key_value(line)
        properties[key] = value
    return properties


def load_properties(path: Path) -> dict[str, str]:
    """Read and parse a UTF-8 properties file."""
    return parse_properties(Path(path).read_text(encoding="utf-8"))


def property_key_to_field(key: str) -> str:
    """Map a dotted property key (``greeting.text``) to a settings field name."""
    return key.strip().lower().replace(".", "_").replace("-", "_")


class PropertiesSettingsSource(PydanticBaseSettingsSource):
    """
    Settings source backed by a ``.properties`` file.

    A missing file contributes nothing. Keys that do not name a settings
    field are ignored. A file that cannot be decoded or parsed raises
    ConfigurationError.
    """

    def __init__(self, settings_cls: type[BaseSettings], properties_file: Path):
        super().__init__(settings_cls)
        self.properties_file = Path(properties_file)
        self._values: dict[str, str] = {}

        if self.properties_file.is_file():
            try:
                raw = load_properties(self.properties_file)
            except (ValueError, OSError) as exc:
                raise ConfigurationError(f"Cannot read properties file {self.properties_file}: {exc}") from exc
            self._values = {property_key_to_field(k): v for k, v in raw.items()}
            logger.info("Loaded %d properties from %s", len(raw), self.properties_file)
        else:
            logger.info("Properties file %s not found, skipping", self.properties_file)

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            if value is not None:
                data[key] = value
        return data
