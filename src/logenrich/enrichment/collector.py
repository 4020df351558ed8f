"""Per-record tag collector."""

from __future__ import annotations

from logenrich.core.errors import InvalidArgumentError

from .protocols import TagValue

_TAG_TYPES = (str, int, float, bool)


class EnrichmentTagCollector:
    """Accumulates tags for a single log record.

    Enrichers only see :meth:`add`; the logging pipeline reads the result
    with :meth:`to_dict` once every enricher has run. Insertion order is
    preserved, and re-adding a key replaces its value in place.
    """

    __slots__ = ("_tags",)

    def __init__(self) -> None:
        self._tags: dict[str, TagValue] = {}

    def add(self, key: str, value: TagValue) -> None:
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError("Tag key must be a non-empty string", argument="key", value=key)
        if value is None:
            raise InvalidArgumentError(f"Tag '{key}' value must not be None", argument="value")
        if not isinstance(value, _TAG_TYPES):
            raise InvalidArgumentError(
                f"Tag '{key}' value must be str, int, float or bool, not {type(value).__name__}",
                argument="value",
                value=value,
            )
        self._tags[key] = value

    def to_dict(self) -> dict[str, TagValue]:
        return dict(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"EnrichmentTagCollector({self._tags!r})"
