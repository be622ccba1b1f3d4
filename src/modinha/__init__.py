"""
modinha – schema-driven model definitions.

    >>> from modinha import Modinha
    >>> Point = Modinha.define({"x": {"default": 0}, "y": {"default": 0}}, name="Point")
    >>> Point.initialize({"x": 3})
    Point({'x': 3, 'y': 0})
"""
import logging

from modinha._config import config
from modinha import defaults
from modinha.errors import (ModinhaError, UndefinedSchemaError, InvalidSchemaError,
                            UndefinedMappingError, JSONParseError, ValidationError)
from modinha.mapping import MapRegistry, map_paths, select
from modinha.model import Modinha
from modinha.options import ConstructOptions
from modinha.schema import apply_schema
from modinha.validate import validate, ValidationResult, FieldError

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(config["log-level"])

define = Modinha.define

__all__ = [
    "Modinha", "define", "defaults",
    "apply_schema", "map_paths", "select", "MapRegistry", "ConstructOptions",
    "validate", "ValidationResult", "FieldError",
    "ModinhaError", "UndefinedSchemaError", "InvalidSchemaError",
    "UndefinedMappingError", "JSONParseError", "ValidationError",
]
