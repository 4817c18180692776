"""Platform-agnostic metadata definitions for bots and scrapers."""

__version__ = "0.1.0"

from actorspec.errors import (
    ActorSpecError,
    ConfigImportError,
    InvalidExportError,
    MissingVersionError,
    OutputWriteError,
    SchemaValidationError,
    SerializationError,
    UnresolvedConfigError,
)
from actorspec.generate import generate, generate_sync
from actorspec.models import (
    ActorInfo,
    ActorSpec,
    Author,
    DatasetFeatures,
    DatasetMode,
    DatasetOutput,
    DatasetPerfStat,
    DatasetPrivacy,
    FilterCompleteness,
    PlatformInfo,
    Pricing,
    ScraperActorSpec,
    ScraperDataset,
    Website,
)

__all__ = [
    "ActorInfo",
    "ActorSpec",
    "ActorSpecError",
    "Author",
    "ConfigImportError",
    "DatasetFeatures",
    "DatasetMode",
    "DatasetOutput",
    "DatasetPerfStat",
    "DatasetPrivacy",
    "FilterCompleteness",
    "InvalidExportError",
    "MissingVersionError",
    "OutputWriteError",
    "PlatformInfo",
    "Pricing",
    "SchemaValidationError",
    "ScraperActorSpec",
    "ScraperDataset",
    "SerializationError",
    "UnresolvedConfigError",
    "Website",
    "__version__",
    "generate",
    "generate_sync",
]
