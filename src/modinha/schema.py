"""
Schema application.

A schema is a plain ``dict`` from field name to field spec. A spec with a
``properties`` key describes a nested object; any other spec is a leaf that
may carry a ``default`` (value or zero-argument callable) and a ``private``
flag.

Examples:
    >>> schema = {
    ...     "name":   {"default": "anonymous"},
    ...     "secret": {"private": True},
    ...     "meta":   {"properties": {"version": {"default": 1}}},
    ... }

    Only fields named in the schema are copied ...
    >>> target = {}
    >>> apply_schema({"name": "ana", "extra": 1}, target, schema)
    >>> target
    {'name': 'ana', 'meta': {'version': 1}}

    ... private fields must be asked for
    >>> target = {}
    >>> apply_schema({"secret": "s3cr3t"}, target, schema, private=True)
    >>> target
    {'name': 'anonymous', 'secret': 's3cr3t', 'meta': {'version': 1}}

    ... and an explicit ``None`` is a value like any other
    >>> target = {}
    >>> apply_schema({"name": None}, target, schema)
    >>> target["name"] is None
    True
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from modinha.errors import InvalidSchemaError

_LEAF_KEYWORDS = ("default", "private")


class _Missing:
    """Marker for "no value at all", as opposed to ``None``."""
    __slots__ = ()

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = _Missing()


def _is_index(key) -> bool:
    return isinstance(key, str) and key.isascii() and key.isdigit()


def lookup(container: Any, key: str) -> Any:
    """
    ``container[key]`` or :data:`MISSING`; never raises.

    Sequences are indexed by plain digit keys ("0", "1", …); keys such as
    "-1" or " 1" count as absent. Anything that cannot be indexed by *key*
    behaves as an empty record.
    """
    if isinstance(container, (str, bytes)):
        return MISSING
    if isinstance(container, (list, tuple)):
        try:
            return container[int(key)] if _is_index(key) else MISSING
        except IndexError:
            return MISSING
    try:
        if key in container:
            return container[key]
    except TypeError:
        pass
    return MISSING


def is_nested(spec: Mapping) -> bool:
    return "properties" in spec


def check_schema(schema: Mapping, prefix: str = "") -> None:
    """Reject field specs that are nested and leaf at the same time."""
    if not isinstance(schema, Mapping):
        raise InvalidSchemaError(f"schema must be a mapping, got {type(schema).__name__}")
    for name, spec in schema.items():
        full = f"{prefix}{name}"
        if not isinstance(spec, Mapping):
            raise InvalidSchemaError(f'"{full}" spec must be a mapping')
        if is_nested(spec):
            mixed = [k for k in _LEAF_KEYWORDS if k in spec]
            if mixed:
                raise InvalidSchemaError(
                    f'"{full}" has "properties" and leaf keywords {mixed}')
            check_schema(spec["properties"], full + ".")


def apply_schema(source: Any, target, schema: Mapping, private: bool = False) -> None:
    """
    Copy values from *source* onto *target* as allowed by *schema*.

    *target* is anything supporting ``in`` and item assignment (a ``dict``
    or a model instance). Defaults fill the leaves *source* does not
    provide; callable defaults are invoked once per field.
    """
    for key, spec in schema.items():
        if is_nested(spec):
            if key not in target or target[key] is None:
                target[key] = {}
            inner = lookup(source, key)
            apply_schema(inner if inner is not MISSING else {},
                         target[key], spec["properties"], private)
            continue

        if spec.get("private") and not private:
            continue

        value = lookup(source, key)
        if value is not MISSING:
            target[key] = value
        elif "default" in spec:
            default = spec["default"]
            target[key] = default() if callable(default) else default
