"""
Validation of data against a model schema.

The construction keywords (``default``, ``private``) are ignored here; the
validator understands ``required``, ``type``, ``enum``, ``pattern``,
``minimum``, ``maximum`` and nested ``properties``.

Examples:
    >>> schema = {
    ...     "name": {"type": "string", "required": True},
    ...     "age":  {"type": "integer", "minimum": 0},
    ...     "role": {"enum": ["admin", "user"]},
    ... }
    >>> validate({"name": "ana", "age": 31, "role": "user"}, schema).valid
    True

    ... every problem is reported with its dotted path
    >>> result = validate({"age": -1, "role": "root"}, schema)
    >>> for e in result.errors:
    ...     print(e)
    "name" is missing.
    "age" must be at least 0
    "role" must be one of 'admin', 'user'
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from modinha.errors import ValidationError
from modinha.rules.predefined import Interval, OneOf, Regex, TypeOf
from modinha.schema import MISSING, is_nested, lookup

__all__ = ["validate", "ValidationResult", "FieldError", "ValidationError"]


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str

    def __str__(self):
        return self.message


@dataclass
class ValidationResult:
    errors: list[FieldError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self):
        return self.valid

    def raise_for_errors(self) -> "ValidationResult":
        if self.errors:
            raise ValidationError(self)
        return self


def _rules_for(spec: Mapping) -> list:
    rules = []
    if "type" in spec:
        types = spec["type"]
        rules.append(TypeOf[tuple(types) if isinstance(types, (list, tuple)) else types])
    if "enum" in spec:
        rules.append(OneOf[tuple(spec["enum"])])
    if "pattern" in spec:
        rules.append(Regex[spec["pattern"]])
    if "minimum" in spec or "maximum" in spec:
        rules.append(Interval[spec.get("minimum"), spec.get("maximum")])
    return rules


def _validate_value(full: str, val: Any, spec: Mapping, errors: list[FieldError]) -> None:
    for rule in _rules_for(spec):
        message = rule.check(full, val)
        if message:
            errors.append(FieldError(full, message))
            # later rules would only repeat the complaint
            return

    if is_nested(spec) and val is not None:
        if not isinstance(val, Mapping):
            errors.append(FieldError(full, f'"{full}" must be an object'))
            return
        _validate_object(val, spec["properties"], full + ".", errors)


def _validate_object(data: Any, schema: Mapping, prefix: str, errors: list[FieldError]) -> None:
    for name, spec in schema.items():
        full = f"{prefix}{name}"
        val = lookup(data, name)
        if val is MISSING:
            if spec.get("required"):
                errors.append(FieldError(full, f'"{full}" is missing.'))
            continue
        _validate_value(full, val, spec, errors)


def validate(subject: Any, schema: Mapping) -> ValidationResult:
    """Check *subject* (a mapping or a model instance) against *schema*."""
    errors: list[FieldError] = []
    _validate_object(subject, schema or {}, "", errors)
    return ValidationResult(errors)
