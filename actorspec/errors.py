"""Errors raised by the actorspec generation pipeline."""

from __future__ import annotations

from pathlib import Path


class ActorSpecError(Exception):
    """Base class for all pipeline failures.

    Every subclass carries the absolute path of the config file that caused
    it, and the message always mentions that path.
    """

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ConfigImportError(ActorSpecError, ImportError):
    """The config module could not be found or raised while executing."""


class InvalidExportError(ActorSpecError, TypeError):
    """The default export is missing or is neither a mapping nor a callable."""


class UnresolvedConfigError(ActorSpecError, TypeError):
    """The export did not resolve to a non-empty mapping."""


class MissingVersionError(ActorSpecError, ValueError):
    """The resolved config has no truthy ``actorspecVersion``."""


class SchemaValidationError(ActorSpecError, ValueError):
    """The resolved config does not match the selected schema model."""

    def __init__(self, message: str, path: Path, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(message, path)


class SerializationError(ActorSpecError, TypeError):
    """The resolved config contains values that cannot be written as JSON."""


class OutputWriteError(ActorSpecError):
    """Creating the output directory or writing actorspec.json failed."""
