"""Validation of a resolved actorspec before it is written.

By default only ``actorspecVersion`` is checked. Stricter modes add a pydantic
schema check on top; callers can also pass their own validator list.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from actorspec.errors import MissingVersionError, SchemaValidationError
from actorspec.models import ActorSpec, ScraperActorSpec

logger = logging.getLogger(__name__)

Validator = Callable[[Mapping[str, Any], Path], None]


def require_version(data: Mapping[str, Any], path: Path) -> None:
    """Fail unless ``actorspecVersion`` is present and truthy."""
    if not data.get("actorspecVersion"):
        raise MissingVersionError(
            f"Invalid actorspec object imported from path {path}, "
            "config.actorspecVersion is missing",
            path,
        )


def _format_error(error: Mapping[str, Any]) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
    return f"{loc}: {error.get('msg', 'invalid')}"


def schema_validator(model: type[BaseModel]) -> Validator:
    """Build a validator that checks the data against a pydantic *model*."""

    def validate(data: Mapping[str, Any], path: Path) -> None:
        try:
            model.model_validate(data)
        except ValidationError as e:
            errors = [_format_error(err) for err in e.errors()]
            raise SchemaValidationError(
                f"Invalid actorspec object imported from path {path}, "
                f"does not match {model.__name__}:\n  " + "\n  ".join(errors),
                path,
                errors,
            ) from e

    validate.__name__ = f"validate_{model.__name__}"
    return validate


VALIDATION_MODES: dict[str, tuple[Validator, ...]] = {
    "minimal": (require_version,),
    "actor": (require_version, schema_validator(ActorSpec)),
    "scraper": (require_version, schema_validator(ScraperActorSpec)),
}


def get_validators(mode: str = "minimal") -> list[Validator]:
    """Return the validator chain for a named mode."""
    try:
        return list(VALIDATION_MODES[mode])
    except KeyError:
        raise ValueError(
            f"Unknown validation mode: {mode} (expected one of {', '.join(VALIDATION_MODES)})"
        ) from None


def run_validators(
    data: Mapping[str, Any], path: Path, validators: Sequence[Validator]
) -> None:
    """Run *validators* in order; the first failure propagates."""
    for validator in validators:
        logger.debug("Running %s on %s", getattr(validator, "__name__", validator), path)
        validator(data, path)
