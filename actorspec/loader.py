"""Load a user config module and resolve its default export to a dict.

The export may be one of:

- a mapping (or pydantic model instance) used as-is,
- a zero-argument function returning one,
- a zero-argument ``async`` function returning one.

Factories are invoked and their result awaited when it is awaitable, so
sync and async factories go through the same code path.
"""

from __future__ import annotations

import hashlib
import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import Any

from pydantic import BaseModel

from actorspec.errors import ConfigImportError, InvalidExportError, UnresolvedConfigError

logger = logging.getLogger(__name__)

DEFAULT_EXPORT = "default"


class ExportKind(str, Enum):
    VALUE = "value"
    FACTORY = "factory"


@dataclass(frozen=True)
class ConfigExport:
    """The default export of a config module, tagged by how to resolve it."""

    kind: ExportKind
    value: Any


def _is_spec_object(value: object) -> bool:
    return isinstance(value, (Mapping, BaseModel))


def _module_name(path: Path) -> str:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    return f"_actorspec_config_{path.stem}_{digest}"


@contextmanager
def _prepend_sys_path(directory: Path) -> Iterator[None]:
    """Let the config module import its sibling modules while it loads."""
    entry = str(directory)
    sys.path.insert(0, entry)
    try:
        yield
    finally:
        if entry in sys.path:
            sys.path.remove(entry)


def load_module(path: Path) -> ModuleType:
    """Execute the Python file at absolute *path* as a fresh module."""
    if not path.is_file():
        raise ConfigImportError(f"Failed to import actorspec from path {path}, file not found", path)

    name = _module_name(path)
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ConfigImportError(
            f"Failed to import actorspec from path {path}, not a Python module", path
        )

    logger.debug("Loading %s as module %s", path, name)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        with _prepend_sys_path(path.parent):
            spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(name, None)
        raise ConfigImportError(
            f"Failed to import actorspec from path {path}: {type(e).__name__}: {e}", path
        ) from e
    return module


def read_export(module: ModuleType, path: Path, export_name: str = DEFAULT_EXPORT) -> ConfigExport:
    """Fetch *export_name* from *module* and tag it as a value or a factory."""
    value = getattr(module, export_name, None)
    if value is None:
        raise InvalidExportError(
            f"Failed to import actorspec from path {path}, "
            f"module has no '{export_name}' export",
            path,
        )
    if callable(value):
        return ConfigExport(ExportKind.FACTORY, value)
    if _is_spec_object(value):
        return ConfigExport(ExportKind.VALUE, value)
    raise InvalidExportError(
        f"Failed to import actorspec from path {path}, got {value!r} instead", path
    )


async def resolve_export(export: ConfigExport, path: Path) -> dict[str, Any]:
    """Turn a config export into a plain dict, invoking and awaiting factories."""
    result = export.value
    if export.kind is ExportKind.FACTORY:
        logger.debug("Invoking factory %r from %s", export.value, path)
        try:
            result = export.value()
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            raise UnresolvedConfigError(
                f"Failed to resolve actorspec from path {path}, "
                f"factory raised {type(e).__name__}: {e}",
                path,
            ) from e

    # An empty mapping is still an object; the version check reports it.
    if result is None or not _is_spec_object(result):
        raise UnresolvedConfigError(
            f"Failed to import actorspec from path {path}, "
            f"the import did not resolve to object, got {result!r} instead",
            path,
        )
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    return dict(result)


async def load_config(path: Path, export_name: str = DEFAULT_EXPORT) -> dict[str, Any]:
    """Load, read and resolve the config at absolute *path* in one call."""
    module = load_module(path)
    export = read_export(module, path, export_name)
    return await resolve_export(export, path)
