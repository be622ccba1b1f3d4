from __future__ import annotations

import functools
import logging
import sys
import types
import warnings
from collections.abc import Mapping
from typing import Any, ClassVar

from modinha import defaults
from modinha.errors import UndefinedSchemaError, ValidationError
from modinha.jsontext import parse_json
from modinha.mapping import MapRegistry, map_paths, select
from modinha.options import ConstructOptions
from modinha.schema import apply_schema, check_schema
from modinha.validate import validate as _validate

logger = logging.getLogger(__name__)

_TEXT = (str, bytes, bytearray)


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside this module, for warnings."""
    frame, level = sys._getframe(1), 1
    while frame is not None and frame.f_globals.get("__name__") == __name__:
        frame, level = frame.f_back, level + 1
    return level


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _as_static(value):
    """Plain functions given as statics are bound to the definition."""
    if isinstance(value, types.FunctionType):
        return classmethod(value)
    return value


def _plain(value):
    if isinstance(value, Modinha):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class _hybridmethod:
    """Bind to the definition and, when looked up on one, to the instance."""

    def __init__(self, fn):
        self.fn = fn
        functools.update_wrapper(self, fn)

    def __get__(self, obj, owner):
        return functools.partial(self.fn, owner, obj)


class Modinha:
    """
    Base of every model definition.

    A definition is a subclass carrying a ``schema``. Derive one with
    :meth:`define` (or :meth:`inherit`), or with a class statement.

    Examples:
        >>> from modinha import defaults
        >>> User = Modinha.define({
        ...     "name":  {"default": "anonymous"},
        ...     "email": {"type": "string"},
        ...     "hash":  {"private": True},
        ...     "prefs": {"properties": {"theme": {"default": "dark"}}},
        ... }, name="User")

        Instances only hold what the schema allows ...
        >>> ana = User.initialize({"email": "ana@example.com", "admin": True})
        >>> ana
        User({'name': 'anonymous', 'email': 'ana@example.com', 'prefs': {'theme': 'dark'}})

        ... fields are reachable as attributes and as items
        >>> ana.email == ana["email"]
        True

        ... JSON text and lists are accepted as well
        >>> [u.name for u in User.initialize('[{"name": "a"}, {"name": "b"}]')]
        ['a', 'b']

        ... private fields are opt-in
        >>> User.initialize({"hash": "x"}, private=True).hash
        'x'

        ... and ``None`` may stay ``None``
        >>> User.initialize(None, nullify=True) is None
        True

        *********
        Mappings
        *********
        Foreign payloads are re-shaped with dotted paths; a mapping can be
        registered under a name.
        >>> Account = User.inherit(None, {"maps": {"github": {"name": "login",
        ...                                                   "prefs.theme": "settings.theme"}}},
        ...                        name="Account")
        >>> Account.initialize({"login": "ana", "settings": {"theme": "light"}}, map="github")
        Account({'name': 'ana', 'prefs': {'theme': 'light'}})

        ... ``select`` copies a subset as is
        >>> User.initialize({"name": "bo", "email": "b@x"}, select=["name"])
        User({'name': 'bo'})

        ***********
        Derivation
        ***********
        Prototype members are inherited unless overridden; functions given
        as statics are called with the definition.
        >>> Admin = User.inherit(
        ...     {"greet": lambda self: f"hi {self.name}"},
        ...     {"kind": lambda cls: cls.__name__},
        ...     name="Admin")
        >>> Admin.initialize({"name": "root"}).greet()
        'hi root'
        >>> Admin.kind(), Admin.superclass is User, Admin.schema is User.schema
        ('Admin', True, True)
    """

    schema: ClassVar[dict | None] = None
    maps: ClassVar[MapRegistry] = MapRegistry()
    superclass: ClassVar[type | None] = None

    defaults = defaults
    ValidationError = ValidationError
    UndefinedSchemaError = UndefinedSchemaError

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        parent = next(b for b in cls.__mro__[1:] if issubclass(b, Modinha))

        own_schema = cls.__dict__.get("schema")
        if own_schema is not None:
            check_schema(own_schema)

        # every definition owns its registry; a parent's is never mutated
        cls.maps = parent.maps.merged(cls.__dict__.get("maps"))
        cls.superclass = parent

    # ───────────────────────── definition ──────────────────────────
    @classmethod
    def define(cls, schema: Mapping | None = None, name: str | None = None):
        """New definition with *schema*; the only required ingredient."""
        if schema is None:
            raise UndefinedSchemaError()
        return cls.inherit(None, {"schema": schema}, name=name or "Model")

    @classmethod
    def inherit(cls, proto: Mapping | None = None, static: Mapping | None = None,
                name: str | None = None):
        """
        Derive a new definition from this one.

        *proto* holds instance members, *static* definition members (a
        ``schema`` and ``maps`` among them). Without a schema of its own the
        receiver must be given one in *static*.
        """
        static = dict(static or {})
        if cls.schema is None and static.get("schema") is None:
            raise UndefinedSchemaError()

        attrs: dict[str, Any] = dict(proto or {})
        attrs.update({key: _as_static(value) for key, value in static.items()})

        sub = type(name or cls.__name__, (cls,), attrs)
        logger.debug("derived %s from %s (proto=%s, static=%s)",
                     sub.__name__, cls.__name__, sorted(proto or ()), sorted(static))
        return sub

    @classmethod
    def extend(cls, proto: Mapping | type | None = None, static: Mapping | None = None):
        """
        Compose members onto this definition.

        Takes ``(proto, static)`` mappings, or a single class whose own
        namespace supplies both (*static* is still laid over it). The
        receiver is left untouched: the result is a new definition with the receiver's name and parent.
        """
        if isinstance(proto, type):
            attrs = {k: v for k, v in vars(proto).items() if not _is_dunder(k)}
        else:
            attrs = dict(proto or {})
        attrs.update({key: _as_static(value) for key, value in (static or {}).items()})

        composed = type(cls.__name__, (cls,), attrs)
        composed.superclass = cls.superclass
        logger.debug("extended %s with %s", cls.__name__, sorted(attrs))
        return composed

    # ─────────────────────────── factory ───────────────────────────
    @classmethod
    def initialize(cls, data: Any = None,
                   options: ConstructOptions | Mapping | None = None, **kw):
        """
        Build instances from *data*.

        ``None``   → ``None`` with ``nullify``, else an instance of defaults
        text       → parsed as JSON, then built
        list/tuple → one instance per item, in order
        otherwise  → one instance
        """
        opts = ConstructOptions.coerce(options, **kw)

        if data is None and opts.nullify:
            return None

        if isinstance(data, _TEXT):
            return cls.initialize(parse_json(data), opts)

        if isinstance(data, (list, tuple)):
            logger.debug("building %d %s instances", len(data), cls.__name__)
            return [cls.initialize(item, opts) for item in data]

        return cls(data or {}, opts)

    def __init__(self, data: Any = None,
                 options: ConstructOptions | Mapping | None = None, **kw):
        self.populate(data or {}, ConstructOptions.coerce(options, **kw))

    def populate(self, data: Any, options: ConstructOptions) -> None:
        """Fill a fresh instance by selection, by mapping or by schema."""
        cls = type(self)

        if options.select:
            if options.map:
                warnings.warn("Both select and map given; map is ignored.",
                              stacklevel=_caller_stacklevel())
            paths = [options.select] if isinstance(options.select, str) else options.select
            logger.debug("%s: selecting %s", cls.__name__, list(paths))
            select(data, self, paths)

        elif options.map:
            registry = cls.maps if options.maps is None else MapRegistry().merged(options.maps)
            logger.debug("%s: mapping with %r", cls.__name__, options.map)
            map_paths(data, self, registry.resolve(options.map))

        else:
            if cls.schema is None:
                raise UndefinedSchemaError(f"{cls.__name__} has no schema")
            apply_schema(data, self, cls.schema, options.private)

    # ────────────────────────── validation ─────────────────────────
    @_hybridmethod
    def validate(cls, instance, data: Any = None):
        """
        ``Model.validate(data)`` checks *data*; ``instance.validate()``
        checks the instance itself.
        """
        subject = instance if instance is not None else data
        return _validate(subject, cls.schema or {})

    # ─────────────────────────── fields ────────────────────────────
    def __getitem__(self, key):
        return self.__dict__[key]

    def __setitem__(self, key, value):
        self.__dict__[key] = value

    def __delitem__(self, key):
        del self.__dict__[key]

    def __contains__(self, key):
        return key in self.__dict__

    def __iter__(self):
        return iter(self.__dict__)

    def __len__(self):
        return len(self.__dict__)

    def to_dict(self) -> dict:
        """Fields as plain, detached dicts and lists."""
        return _plain(self.__dict__)

    def __eq__(self, other):
        if not isinstance(other, Modinha):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.__dict__!r})"
