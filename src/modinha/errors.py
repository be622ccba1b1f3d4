"""Exceptions raised by modinha."""

from __future__ import annotations


class ModinhaError(Exception):
    """Base class for every modinha error."""


class UndefinedSchemaError(ModinhaError):
    """Raised when a model is derived from the base without a schema."""

    def __init__(self, message: str = "Extending Model requires a schema"):
        super().__init__(message)


class InvalidSchemaError(ModinhaError, ValueError):
    """Raised when a field spec mixes nested and leaf keywords."""


class UndefinedMappingError(ModinhaError, KeyError):
    """Raised when a named mapping is not registered."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class JSONParseError(ModinhaError, ValueError):
    """Raised when text input is not valid JSON."""

    def __init__(self, message: str = "failed to parse JSON"):
        super().__init__(message)


class ValidationError(ModinhaError):
    """Raised on request when a subject does not satisfy its schema."""

    def __init__(self, result):
        self.result = result
        first = result.errors[0] if result.errors else None
        message = f"{first.message}" if first else "validation failed"
        if len(result.errors) > 1:
            message += f" (and {len(result.errors) - 1} more)"
        super().__init__(message)
