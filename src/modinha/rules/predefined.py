import re
from collections.abc import Mapping

from modinha.rules import Rule


def _json_type(v):
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "boolean"
    if isinstance(v, int):
        return "integer"
    if isinstance(v, float):
        return "number"
    if isinstance(v, str):
        return "string"
    if isinstance(v, (list, tuple)):
        return "array"
    if isinstance(v, Mapping):
        return "object"
    return type(v).__name__


class TypeOf(Rule):
    """
    >>> TypeOf["integer"].validate(3), TypeOf["integer"].validate(True)
    (True, False)
    >>> TypeOf["string", "null"].describe()
    'must be string or null'
    """

    @classmethod
    def describe(cls):
        return "must be " + " or ".join(cls.__rule_params__)

    @classmethod
    def validate(cls, v):
        actual = _json_type(v)
        allowed = cls.__rule_params__
        # every integer is also a number
        return actual in allowed or (actual == "integer" and "number" in allowed)


class Interval(Rule):
    """Closed interval; either bound may be ``None`` (unbounded)."""

    @classmethod
    def describe(cls):
        lo, hi = cls.__rule_params__
        if lo is None:
            return f"must be at most {hi}"
        if hi is None:
            return f"must be at least {lo}"
        return f"must be a number between {lo} and {hi}"

    @classmethod
    def validate(cls, v):
        lo, hi = cls.__rule_params__
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return False
        return (lo is None or lo <= v) and (hi is None or v <= hi)


class OneOf(Rule):
    @classmethod
    def describe(cls):
        return "must be one of " + ", ".join(map(repr, cls.__rule_params__))

    @classmethod
    def validate(cls, v):
        return v in cls.__rule_params__


class Regex(Rule):
    @classmethod
    def describe(cls):
        pattern, = cls.__rule_params__
        return f'must be a string matching regex "{pattern}"'

    @classmethod
    def validate(cls, v):
        pattern, = cls.__rule_params__
        return isinstance(v, str) and re.search(pattern, v) is not None
