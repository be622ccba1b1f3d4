"""
Declarative re-shaping of foreign data.

A mapping reads "target path ← source path", both dot-separated:

    >>> payload = {"login": "ana", "profile": {"html_url": "https://x"}, "id": 7}
    >>> out = {}
    >>> map_paths(payload, out, {"name": "login", "links.home": "profile.html_url"})
    >>> out
    {'name': 'ana', 'links': {'home': 'https://x'}}

A selection is the mapping where every path maps to itself:

    >>> out = {}
    >>> select({"x": 0, "y": {"z": False}}, out, ["x", "y.z", "w"])
    >>> out
    {'x': 0, 'y': {'z': False}, 'w': None}
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from modinha.errors import UndefinedMappingError
from modinha.schema import MISSING, lookup

logger = logging.getLogger(__name__)


def _get_path(data: Any, parts: list[str]) -> Any:
    """Walk *data* along *parts*; :data:`MISSING` as soon as a key is absent."""
    for part in parts:
        data = lookup(data, part)
        if data is MISSING:
            return MISSING
    return data


def _apply_path(obj, parts: list[str], value) -> None:
    """Assign *value* at *parts*, creating intermediate dicts as needed."""
    head, *tail = parts
    if not tail:
        obj[head] = value
        return
    current = lookup(obj, head)
    if not isinstance(current, MutableMapping):
        if current is not MISSING and current is not None:
            logger.debug("replacing non-container %r at %r", current, head)
        obj[head] = {}
    _apply_path(obj[head], tail, value)


def map_paths(data: Any, instance, mapping: Mapping[str, str]) -> None:
    """
    Copy every source path of *mapping* to its target path on *instance*.

    A source path that does not resolve writes ``None``; nothing is
    validated and no defaults are applied.
    """
    for target_path, source_path in mapping.items():
        value = _get_path(data, source_path.split("."))
        if value is MISSING:
            logger.debug("path %r not found in source", source_path)
            value = None
        _apply_path(instance, target_path.split("."), value)


def select(data: Any, instance, selection: Iterable[str]) -> None:
    """Shorthand for a mapping where each path maps onto itself."""
    map_paths(data, instance, {path: path for path in selection})


class MapRegistry:
    """
    Named mappings of one model definition.

        >>> maps = MapRegistry({"github": {"name": "login"}})
        >>> maps.resolve("github")
        {'name': 'login'}
        >>> maps.resolve({"name": "full_name"})
        {'name': 'full_name'}
    """

    def __init__(self, maps: Mapping[str, Mapping[str, str]] | None = None):
        self._maps: dict[str, dict[str, str]] = {}
        for name, mapping in (maps or {}).items():
            self.register(name, mapping)

    def register(self, name: str, mapping: Mapping[str, str]) -> None:
        self._maps[name] = dict(mapping)

    def resolve(self, mapping: str | Mapping[str, str]) -> Mapping[str, str]:
        """A literal mapping is returned as is, a name is looked up."""
        if not isinstance(mapping, str):
            return mapping
        try:
            return self._maps[mapping]
        except KeyError:
            raise UndefinedMappingError(f'no mapping named "{mapping}"') from None

    def copy(self) -> "MapRegistry":
        return MapRegistry(self._maps)

    def merged(self, other: Mapping[str, Mapping[str, str]] | "MapRegistry" | None) -> "MapRegistry":
        """A new registry: this one overlaid with *other*."""
        merged = self.copy()
        items = other._maps if isinstance(other, MapRegistry) else (other or {})
        for name, mapping in items.items():
            merged.register(name, mapping)
        return merged

    def __getitem__(self, name: str) -> Mapping[str, str]:
        return self.resolve(name)

    def __contains__(self, name) -> bool:
        return name in self._maps

    def __iter__(self):
        return iter(self._maps)

    def __len__(self):
        return len(self._maps)

    def __repr__(self):
        return f"MapRegistry({self._maps!r})"
