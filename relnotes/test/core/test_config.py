"""Tests for relnotes.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relnotes.core.config import (
    Config,
    ConfigError,
    ReleaseConfig,
    load_config,
)
from relnotes.core.result import Err, Ok


class TestConfigDefaults:
    def test_defaults(self) -> None:
        config = Config()
        assert config.release == ReleaseConfig(strategy="auto", tag_format="{id}-release")
        assert config.notes.product_name is None
        assert config.notes.link_base_url is None
        assert config.github.repo is None
        assert config.webhook.url is None

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.release = ReleaseConfig()  # type: ignore[misc]


class TestFromDict:
    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "release": {"strategy": "hotfix", "tag_format": "rel/{id}-release"},
                "notes": {"product_name": "Acme", "link_base_url": "https://jira/browse"},
                "github": {"repo": "acme/app"},
                "webhook": {"url": "https://hooks.example/abc"},
            }
        )
        assert config.release.strategy == "hotfix"
        assert config.release.tag_format == "rel/{id}-release"
        assert config.notes.product_name == "Acme"
        assert config.notes.link_base_url == "https://jira/browse"
        assert config.github.repo == "acme/app"
        assert config.webhook.url == "https://hooks.example/abc"

    def test_empty_strings_fall_back(self) -> None:
        config = Config.from_dict({"release": {"strategy": "  ", "tag_format": ""}})
        assert config.release == ReleaseConfig()

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ValueError, match="release.strategy"):
            Config.from_dict({"release": {"strategy": "calver"}})

    def test_tag_format_without_placeholder(self) -> None:
        with pytest.raises(ValueError, match="release.tag_format"):
            Config.from_dict({"release": {"tag_format": "release"}})

    def test_non_table_sections_are_ignored(self) -> None:
        config = Config.from_dict({"release": "sequential", "github": 3})
        assert config == Config()


class TestLoadConfig:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "relnotes.toml"
        path.write_text(
            '[release]\nstrategy = "semver"\n\n[github]\nrepo = "acme/app"\n',
            encoding="utf-8",
        )
        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.release.strategy == "semver"
        assert result.value.github.repo == "acme/app"

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.toml"
        result = load_config(path)
        assert isinstance(result, Err)
        assert result.error == ConfigError(f"Config file not found: {path}", path=path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "relnotes.toml"
        path.write_text("[release\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML syntax" in result.error.message

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "relnotes.toml"
        path.write_text('[release]\nstrategy = "nope"\n', encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert result.error.message.startswith("Invalid config:")
        assert result.error.path == path

    def test_directory_path(self, tmp_path: Path) -> None:
        result = load_config(tmp_path)
        assert isinstance(result, Err)
        assert result.error.message.startswith("Error reading config:")
        assert result.error.path == tmp_path
