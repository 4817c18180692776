"""Serialization and atomic writing of actorspec.json."""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from pydantic_core import to_jsonable_python

from actorspec.errors import OutputWriteError, SerializationError
from actorspec.paths import to_absolute

logger = logging.getLogger(__name__)

OUTPUT_FILENAME = "actorspec.json"
DEFAULT_OUT_DIRNAME = ".actor"


def _target_mode(out_file: Path) -> int:
    """Mode for the written file: keep an existing file's, else honour the umask."""
    try:
        return stat.S_IMODE(out_file.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def resolve_out_dir(out_dir: str | None, cwd: str | os.PathLike[str] | None = None) -> Path:
    """Pick the output directory.

    An explicit *out_dir* always wins. Otherwise ``.actor`` is used when it
    exists under *cwd*, falling back to *cwd* itself.
    """
    if out_dir:
        return to_absolute(out_dir, cwd)
    actor_dir = to_absolute(DEFAULT_OUT_DIRNAME, cwd)
    if actor_dir.is_dir():
        return actor_dir
    return to_absolute(".", cwd)


def serialize(data: dict[str, Any], source: Path) -> str:
    """Dump *data* as 2-space indented JSON, keeping its key order."""
    try:
        return json.dumps(data, indent=2, ensure_ascii=False, default=to_jsonable_python)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Failed to serialize actorspec imported from path {source}: {e}", source
        ) from e


def write_output(text: str, out_dir: Path, source: Path) -> Path:
    """Write *text* to ``out_dir/actorspec.json``, replacing any existing file.

    The content goes to a temporary file in *out_dir* first and is then moved
    over the target, so readers never see a half-written file.
    """
    out_file = out_dir / OUTPUT_FILENAME
    tmp_name: str | None = None
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=out_dir,
            prefix=f".{OUTPUT_FILENAME}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(text)
        # mkstemp creates the file as 0600
        os.chmod(tmp_name, _target_mode(out_file))
        logger.debug("Moving %s to %s", tmp_name, out_file)
        os.replace(tmp_name, out_file)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteError(
            f"Failed to write actorspec imported from path {source} to {out_file}: {e}",
            source,
        ) from e
    return out_file
