"""Shared fixtures for actorspec tests."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all ACTORSPEC env vars so tests are isolated."""
    for key in (
        "ACTORSPEC_OUT_DIR",
        "ACTORSPEC_EXPORT",
        "ACTORSPEC_VALIDATE",
        "ACTORSPEC_SILENT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a config module under tmp_path and return its path."""

    def _write(source: str, name: str = "actorspec_config.py") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scraper_spec() -> dict[str, Any]:
    """A complete, valid ScraperActorSpec in wire (camelCase) format."""
    return {
        "actorspecVersion": 1,
        "actor": {
            "title": "Profesia.sk Scraper",
            "publicUrl": "https://apify.com/jurooravec/profesia-sk-scraper",
            "shortDesc": "One-stop-shop for all data on Profesia.sk",
            "datasetOverviewImgUrl": None,
        },
        "platform": {
            "name": "apify",
            "url": "https://apify.com",
            "authorId": "jurooravec",
            "authorProfileUrl": "https://apify.com/jurooravec",
            "actorId": "profesia-sk-scraper",
            "socials": {"discord": "https://discord.com/invite/jyEM2PRvMU"},
        },
        "authors": [
            {"name": "Juro Oravec", "email": "juraj@example.com", "authorUrl": None},
        ],
        "websites": [{"name": "Profesia.sk", "url": "https://www.profesia.sk"}],
        "pricing": {
            "pricingType": "monthly fee",
            "value": 25,
            "currency": "usd",
            "period": 1,
            "periodUnit": "month",
        },
        "datasets": [
            {
                "name": "jobOffers",
                "shortDesc": "Job offers",
                "url": "https://www.profesia.sk/praca",
                "size": 21000,
                "isDefault": True,
                "filters": ["keywords", "salary", "employment type"],
                "filterCompleteness": "full",
                "modes": [
                    {"name": "Fast", "isDefault": True, "shortDesc": "data from listing pages"},
                    {"name": "Detailed", "isDefault": False, "shortDesc": "includes details"},
                ],
                "features": {
                    "usesBrowser": False,
                    "proxySupport": True,
                    "configurable": True,
                    "regularlyTested": True,
                    "privacyCompliance": True,
                    "errorMonitoring": True,
                },
                "perfStats": [
                    {"rowId": "fast", "colId": "100items", "count": 100, "costUsd": 0.014, "timeSec": 120, "mode": "Fast"},
                    {"rowId": "fast", "colId": "fullRun", "count": "all", "costUsd": 0.289, "timeSec": 2520, "mode": None},
                ],
                "privacy": {
                    "personalDataFields": ["employerContact"],
                    "isPersonalDataRedacted": True,
                    "personalDataSubjects": ["employees"],
                },
                "output": {
                    "exampleEntry": {"offerId": "4420233", "salaryFrom": 1500},
                    "exampleEntryComments": {"salaryFrom": "Monthly gross salary in EUR"},
                },
            },
        ],
    }
