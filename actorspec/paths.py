"""Resolution of user-supplied, cwd-relative paths."""

from __future__ import annotations

import os
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


def to_absolute(path: str | os.PathLike[str], cwd: str | os.PathLike[str] | None = None) -> Path:
    """Resolve *path* against *cwd* (defaults to the process working directory).

    ``~`` is expanded and symlinks are resolved. Absolute paths are only
    normalised. Nothing is checked for existence; a missing file surfaces
    later as a load failure.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    p = Path(path).expanduser()
    return (base / p).resolve()


def to_loader_relative(
    path: str | os.PathLike[str], cwd: str | os.PathLike[str] | None = None
) -> Path:
    """Return *path* relative to the ``actorspec`` package directory.

    The config loader imports by absolute path, so this is only used in debug
    output. The result may contain ``..`` segments. When no relative path
    exists (another drive on Windows) the absolute path is returned.
    """
    absolute = to_absolute(path, cwd)
    try:
        return Path(os.path.relpath(absolute, _PACKAGE_DIR))
    except ValueError:
        return absolute
