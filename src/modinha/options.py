from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from modinha.mapping import MapRegistry


@dataclass(frozen=True)
class ConstructOptions:
    """
    Options accepted by ``initialize`` and by model constructors.

    select  : field paths to copy verbatim instead of applying the schema
    map     : mapping (or the name of a registered one) to re-shape the data
    maps    : registry used to resolve a named ``map`` instead of the model's
    private : also copy fields marked private in the schema
    nullify : return ``None`` instead of an instance when data is ``None``
    """
    select: Sequence[str] | None = None
    map: str | Mapping[str, str] | None = None
    maps: MapRegistry | Mapping[str, Any] | None = None
    private: bool = False
    nullify: bool = False

    @classmethod
    def coerce(cls, options: "ConstructOptions | Mapping[str, Any] | None" = None,
               **overrides) -> "ConstructOptions":
        """Accept an existing instance, a plain mapping or keywords."""
        if isinstance(options, cls):
            base = vars(options).copy()
        else:
            base = dict(options or {})
        base.update(overrides)
        return cls(**base)
