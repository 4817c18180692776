"""Schema models describing an actor and, for scrapers, its datasets.

Attributes are snake_case; the JSON wire names are camelCase aliases, so
``ActorSpec.model_validate({"actorspecVersion": 1, ...})`` and
``spec.model_dump(by_alias=True)`` both speak the actorspec.json format.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


class _SpecModel(
    BaseModel,
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
):
    """Common config for every actorspec record."""


# ---------------------------------------------------------------------------
# ActorSpec
# ---------------------------------------------------------------------------


class ActorInfo(_SpecModel):
    """Info about the actor itself."""

    title: str
    public_url: str | None
    short_desc: str
    # Image that shows an overview of the extracted data
    dataset_overview_img_url: str | None = None


class PlatformInfo(_SpecModel):
    """The platform the actor is published on, e.g. ``apify``."""

    name: str
    url: str
    author_id: str
    author_profile_url: str | None = None
    actor_id: str
    socials: dict[str, str] | None = None


class Author(_SpecModel):
    name: str
    email: str
    author_url: str | None = None


class Website(_SpecModel):
    name: str
    url: str


class Pricing(_SpecModel):
    """Pricing of the actor.

    ``"$0.50 per 1000 entries"`` is ``value=0.5``, ``currency="usd"``,
    ``period=1000``, ``period_unit="entries"``.
    """

    pricing_type: str
    value: float
    currency: str
    period: float
    period_unit: str


class ActorSpec(_SpecModel):
    """Versioned, platform-agnostic reference to a deployed actor."""

    # Currently only version 1 exists
    actorspec_version: int = Field(ge=1)
    actor: ActorInfo
    platform: PlatformInfo
    authors: list[Author]
    websites: list[Website]
    pricing: Pricing


# ---------------------------------------------------------------------------
# ScraperActorSpec
# ---------------------------------------------------------------------------


class FilterCompleteness(str, Enum):
    """How fully a dataset exposes the filters of the original source.

    - ``none``: no filters available
    - ``some``: some filters available
    - ``full``: all filters of the original web / UI / API are supported
    - ``extra``: same as ``full``, plus extra filters
    """

    NONE = "none"
    SOME = "some"
    FULL = "full"
    EXTRA = "extra"


class DatasetMode(_SpecModel):
    """A scraper mode that impacts pricing, performance or returned data."""

    name: str
    is_default: bool
    short_desc: str


class DatasetFeatures(_SpecModel):
    uses_browser: bool
    proxy_support: bool
    configurable: bool
    regularly_tested: bool
    privacy_compliance: bool
    error_monitoring: bool


class DatasetPerfStat(_SpecModel):
    """Single performance / cost datapoint, rendered as one table cell."""

    row_id: str
    col_id: str
    cost_usd: float
    time_sec: float
    mode: str | None = None
    count: int | float | Literal["all"]


class DatasetPrivacy(_SpecModel):
    personal_data_fields: list[str] = Field(default_factory=list)
    is_personal_data_redacted: bool
    personal_data_subjects: list[str] = Field(default_factory=list)


class DatasetOutput(_SpecModel):
    """An example extracted entry plus optional per-field comments."""

    example_entry: Any
    example_entry_comments: dict[str, str] | None = None

    @model_validator(mode="after")
    def _comments_match_entry(self) -> DatasetOutput:
        if not self.example_entry_comments or not isinstance(self.example_entry, dict):
            return self
        unknown = sorted(set(self.example_entry_comments) - set(self.example_entry))
        if unknown:
            raise ValueError(
                f"exampleEntryComments has keys not present in exampleEntry: {', '.join(unknown)}"
            )
        return self


class ScraperDataset(_SpecModel):
    name: str
    short_desc: str
    url: str
    size: float
    is_default: bool
    filters: list[str] = Field(default_factory=list)
    filter_completeness: FilterCompleteness
    modes: list[DatasetMode] = Field(default_factory=list)
    features: DatasetFeatures
    perf_stats: list[DatasetPerfStat] = Field(default_factory=list)
    privacy: DatasetPrivacy
    output: DatasetOutput


class ScraperActorSpec(ActorSpec):
    """ActorSpec of a scraper, with the datasets it can extract."""

    datasets: list[ScraperDataset]
