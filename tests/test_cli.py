"""Tests for the CLI entry point."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from actorspec import __version__
from actorspec.cli import main

_CONFIG = "default = {'actorspecVersion': 1, 'actor': {'title': 'Demo'}}\n"


@pytest.fixture
def in_tmp(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_version() -> None:
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_generate_requires_config() -> None:
    result = CliRunner().invoke(main, ["generate"])
    assert result.exit_code != 0
    assert "--config" in result.output


def test_generate_writes_file(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    write_config(_CONFIG)
    result = CliRunner().invoke(main, ["generate", "--config", "actorspec_config.py"])
    assert result.exit_code == 0, result.output
    assert "Done!" in result.output
    data = json.loads((in_tmp / "actorspec.json").read_text(encoding="utf-8"))
    assert data == {"actorspecVersion": 1, "actor": {"title": "Demo"}}


def test_generate_out_dir_and_silent(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    write_config(_CONFIG)
    result = CliRunner().invoke(
        main, ["generate", "-c", "actorspec_config.py", "-o", "out", "--silent"]
    )
    assert result.exit_code == 0, result.output
    assert result.output == ""
    assert (in_tmp / "out" / "actorspec.json").exists()


def test_generate_error_exits_nonzero(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    path = write_config("default = 'not a spec'\n")
    result = CliRunner().invoke(main, ["generate", "-c", "actorspec_config.py"])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert str(path.resolve()) in result.output
    assert not (in_tmp / "actorspec.json").exists()


def test_generate_strict_validation(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    write_config(_CONFIG)
    result = CliRunner().invoke(
        main, ["generate", "-c", "actorspec_config.py", "--validate", "scraper"]
    )
    assert result.exit_code == 1
    assert "does not match ScraperActorSpec" in result.output


def test_generate_export_option(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    write_config("def build():\n    return {'actorspecVersion': 2}\n")
    result = CliRunner().invoke(
        main, ["generate", "-c", "actorspec_config.py", "--export", "build", "-s"]
    )
    assert result.exit_code == 0, result.output
    assert json.loads((in_tmp / "actorspec.json").read_text(encoding="utf-8")) == {
        "actorspecVersion": 2
    }


class TestEnvConfig:
    def test_out_dir_from_env(
        self, monkeypatch: pytest.MonkeyPatch, in_tmp: Path, write_config: Callable[..., Path]
    ) -> None:
        monkeypatch.setenv("ACTORSPEC_OUT_DIR", "from-env")
        write_config(_CONFIG)
        result = CliRunner().invoke(main, ["generate", "-c", "actorspec_config.py", "-s"])
        assert result.exit_code == 0, result.output
        assert (in_tmp / "from-env" / "actorspec.json").exists()

    def test_flag_overrides_env(
        self, monkeypatch: pytest.MonkeyPatch, in_tmp: Path, write_config: Callable[..., Path]
    ) -> None:
        monkeypatch.setenv("ACTORSPEC_OUT_DIR", "from-env")
        write_config(_CONFIG)
        result = CliRunner().invoke(main, ["generate", "-c", "actorspec_config.py", "-o", "from-flag", "-s"])
        assert result.exit_code == 0, result.output
        assert (in_tmp / "from-flag" / "actorspec.json").exists()
        assert not (in_tmp / "from-env").exists()

    def test_invalid_validate_mode_from_env(
        self, monkeypatch: pytest.MonkeyPatch, in_tmp: Path, write_config: Callable[..., Path]
    ) -> None:
        monkeypatch.setenv("ACTORSPEC_VALIDATE", "paranoid")
        write_config(_CONFIG)
        result = CliRunner().invoke(main, ["generate", "-c", "actorspec_config.py"])
        assert result.exit_code == 1
        assert "Unknown validation mode" in result.output
