"""Configuration for actorspec."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Runtime configuration, populated from environment variables."""

    out_dir: str | None = None
    export_name: str = "default"
    validate: str = "minimal"
    silent: bool = False

    @classmethod
    def from_env(cls) -> Config:
        return cls(
            out_dir=os.environ.get("ACTORSPEC_OUT_DIR") or None,
            export_name=os.environ.get("ACTORSPEC_EXPORT", cls.export_name),
            validate=os.environ.get("ACTORSPEC_VALIDATE", cls.validate),
            silent=os.environ.get("ACTORSPEC_SILENT", "").strip().lower() in _TRUTHY,
        )
