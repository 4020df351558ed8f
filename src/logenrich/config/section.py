"""
Hierarchical configuration sections.

A :class:`ConfigurationSection` is a read-only view over a flat mapping of
``:``-delimited keys to string values::

    ApplicationLogEnricher:ApplicationName = svc-B
    ApplicationLogEnricher:EnvironmentName = prod

``get_section("ApplicationLogEnricher")`` returns the view rooted at that
prefix; lookups are case-insensitive at every level. Sections can be built
from nested mappings, environment variables (``__`` as the hierarchy
delimiter, the same convention pydantic-settings uses) or TOML files.

Tags:
    logenrich, configuration, sections, env-vars, toml

Doc-Types:
    api-reference
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from logenrich.core.errors import InvalidConfigError

KEY_DELIMITER = ":"
ENV_DELIMITER = "__"


def combine_path(*segments: str) -> str:
    """Join non-empty key segments with the ``:`` delimiter."""
    return KEY_DELIMITER.join(s for s in segments if s)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_mapping(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings into ``{"a:b:c": "value"}`` form.

    Lists are indexed (``a:0``, ``a:1``); ``None`` leaves are dropped.
    """
    result: dict[str, str] = {}
    for key, value in data.items():
        full_key = combine_path(prefix, str(key))
        if isinstance(value, Mapping):
            result.update(flatten_mapping(value, full_key))
        elif isinstance(value, (list, tuple)):
            result.update(flatten_mapping({str(i): v for i, v in enumerate(value)}, full_key))
        elif value is not None:
            result[full_key] = _scalar(value)
    return result


class ConfigurationSection:
    """Read-only, case-insensitive view over hierarchical configuration.

    Args:
        values: Flat mapping of full ``:``-delimited keys to values
        path: Path of this section within *values* ("" for the root)
    """

    def __init__(self, values: Mapping[str, str | None] | None = None, path: str = "") -> None:
        self._data: dict[str, tuple[str, str]] = {}
        for key, value in (values or {}).items():
            if value is None:
                continue
            self._data[key.lower()] = (key, _scalar(value))
        self._path = path

    @classmethod
    def _view(cls, data: dict[str, tuple[str, str]], path: str) -> ConfigurationSection:
        section = cls.__new__(cls)
        section._data = data
        section._path = path
        return section

    # ── Constructors ─────────────────────────────────────────────

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ConfigurationSection:
        """Build a root section from a (possibly nested) mapping."""
        return cls(flatten_mapping(data))

    @classmethod
    def from_env(
        cls,
        prefix: str = "",
        environ: Mapping[str, str] | None = None,
    ) -> ConfigurationSection:
        """Build a root section from environment variables.

        Only variables starting with *prefix* (case-insensitive) are kept;
        the prefix is stripped and ``__`` becomes ``:``. So with
        ``prefix="LOGENRICH_"``, ``LOGENRICH_ApplicationLogEnricher__ApplicationName``
        maps to ``ApplicationLogEnricher:ApplicationName``.
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for name, value in env.items():
            if prefix and not name.upper().startswith(prefix.upper()):
                continue
            key = name[len(prefix):].replace(ENV_DELIMITER, KEY_DELIMITER)
            if key:
                values[key] = value
        return cls(values)

    @classmethod
    def from_toml(cls, path: Path | str) -> ConfigurationSection:
        """Build a root section from a TOML file.

        Raises:
            InvalidConfigError: If the file cannot be read or parsed.
        """
        path = Path(path)
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise InvalidConfigError(
                "toml_file", str(path), f"Cannot load configuration file {path}: {exc}", cause=exc
            ).with_context(source=str(path)) from exc
        return cls.from_mapping(data)

    # ── Navigation ───────────────────────────────────────────────

    @property
    def path(self) -> str:
        """Full path of this section ("" for the root)."""
        return self._path

    @property
    def key(self) -> str:
        """Last segment of :attr:`path`."""
        return self._path.rsplit(KEY_DELIMITER, 1)[-1]

    @property
    def value(self) -> str | None:
        """Value stored at this section's own path, if any."""
        entry = self._data.get(self._path.lower())
        return entry[1] if entry else None

    def get_section(self, key: str) -> ConfigurationSection:
        """Sub-section at *key*; always returns a section, possibly empty."""
        return self._view(self._data, combine_path(self._path, key))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Value at *key* relative to this section, or *default*."""
        entry = self._data.get(combine_path(self._path, key).lower())
        return entry[1] if entry else default

    def exists(self) -> bool:
        """True when this section has a value or any descendant key."""
        if self.value is not None:
            return True
        return any(True for _ in self._descendants())

    def _descendants(self) -> Iterator[tuple[str, str]]:
        """(relative key, value) pairs below this section, in insertion order."""
        prefix = f"{self._path.lower()}{KEY_DELIMITER}" if self._path else ""
        for lowered, (original, value) in self._data.items():
            if lowered.startswith(prefix) and lowered != self._path.lower():
                yield original[len(prefix):], value

    def keys(self) -> list[str]:
        """Names of direct children, first-seen casing and order."""
        seen: dict[str, str] = {}
        for relative, _ in self._descendants():
            child = relative.split(KEY_DELIMITER, 1)[0]
            seen.setdefault(child.lower(), child)
        return list(seen.values())

    def items(self) -> list[tuple[str, str]]:
        """Direct children that carry a value, as (name, value) pairs."""
        result = []
        for child in self.keys():
            value = self.get(child)
            if value is not None:
                result.append((child, value))
        return result

    def to_dict(self) -> dict[str, str]:
        """Flat mapping of every descendant key (relative to this section)."""
        return dict(self._descendants())

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyError(combine_path(self._path, key))
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __repr__(self) -> str:
        return f"ConfigurationSection(path={self._path!r}, keys={self.keys()!r})"
