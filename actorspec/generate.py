"""The generate pipeline: config module in, actorspec.json out."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import click

from actorspec.loader import DEFAULT_EXPORT, load_module, read_export, resolve_export
from actorspec.output import OUTPUT_FILENAME, resolve_out_dir, serialize, write_output
from actorspec.paths import to_absolute, to_loader_relative
from actorspec.validation import Validator, get_validators, run_validators

logger = logging.getLogger(__name__)


def _noop(*_args: object, **_kwargs: object) -> None:
    return None


async def generate(
    config: str,
    out_dir: str | None = None,
    silent: bool = False,
    *,
    export_name: str = DEFAULT_EXPORT,
    validators: Sequence[Validator] | None = None,
    cwd: str | os.PathLike[str] | None = None,
) -> Path:
    """Resolve the config module at *config* and write it as actorspec.json.

    Parameters
    ----------
    config:
        Path to the config module, relative to *cwd*.
    out_dir:
        Directory for actorspec.json, relative to *cwd*. Defaults to ``.actor``
        when that directory exists, else *cwd*.
    silent:
        Suppress progress lines on stdout.
    export_name:
        Module attribute holding the spec or its factory.
    validators:
        Checks run on the resolved dict. Defaults to the ``minimal`` chain,
        which only requires ``actorspecVersion``.
    cwd:
        Base for relative paths. Defaults to the process working directory.

    Returns the absolute path of the written file. Any failure raises an
    :class:`~actorspec.errors.ActorSpecError` and leaves no file behind.
    """
    log = _noop if silent else click.echo

    abs_config_path = to_absolute(config, cwd)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Loader-relative config path: %s", to_loader_relative(config, cwd))
    log(f"Importing file from {abs_config_path}")

    module = load_module(abs_config_path)
    export = read_export(module, abs_config_path, export_name)

    log("Actorspec found! Resolving...")
    resolved = await resolve_export(export, abs_config_path)

    run_validators(
        resolved,
        abs_config_path,
        get_validators() if validators is None else validators,
    )
    text = serialize(resolved, abs_config_path)

    abs_out_dir = resolve_out_dir(out_dir, cwd)
    log(f"Writing resolved config to file {abs_out_dir / OUTPUT_FILENAME}")
    out_file = await asyncio.to_thread(write_output, text, abs_out_dir, abs_config_path)

    log("Done!")
    return out_file


def generate_sync(config: str, out_dir: str | None = None, silent: bool = False, **kwargs: Any) -> Path:
    """Blocking wrapper around :func:`generate` for non-async callers."""
    return asyncio.run(generate(config, out_dir, silent, **kwargs))
