"""Typed configuration loading.

Configuration lives in a ``relnotes.toml`` file. Every key is optional; the
CLI layers its options on top of whatever the file provides. Nothing here
reads the process environment.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

from relnotes.release.model import (
    DEFAULT_TAG_FORMAT,
    STRATEGIES,
    TAG_FORMAT_PLACEHOLDER,
    Strategy,
)

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigError",
    "GitHubConfig",
    "NotesConfig",
    "ReleaseConfig",
    "WebhookConfig",
    "load_config",
]

CONFIG_FILE_NAME = "relnotes.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """How release tags are addressed."""

    strategy: Strategy = "auto"
    tag_format: str = DEFAULT_TAG_FORMAT


@dataclass(frozen=True, slots=True)
class NotesConfig:
    product_name: str | None = None
    link_base_url: str | None = None


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    repo: str | None = None


@dataclass(frozen=True, slots=True)
class WebhookConfig:
    url: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    release: ReleaseConfig = field(default_factory=ReleaseConfig)
    notes: NotesConfig = field(default_factory=NotesConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)
    webhook: WebhookConfig = field(default_factory=WebhookConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If the strategy or tag format is invalid.
        """
        release: StrDict = get_table(data, "release") or {}
        notes: StrDict = get_table(data, "notes") or {}
        github: StrDict = get_table(data, "github") or {}
        webhook: StrDict = get_table(data, "webhook") or {}

        strategy = get_str(release, "strategy") or "auto"
        if strategy not in STRATEGIES:
            raise ValueError(
                f"release.strategy must be one of {', '.join(STRATEGIES)}, got {strategy!r}"
            )

        tag_format = get_str(release, "tag_format") or DEFAULT_TAG_FORMAT
        if TAG_FORMAT_PLACEHOLDER not in tag_format:
            raise ValueError(
                f"release.tag_format must contain {TAG_FORMAT_PLACEHOLDER}, got {tag_format!r}"
            )

        return cls(
            release=ReleaseConfig(strategy=cast(Strategy, strategy), tag_format=tag_format),
            notes=NotesConfig(
                product_name=get_str(notes, "product_name"),
                link_base_url=get_str(notes, "link_base_url"),
            ),
            github=GitHubConfig(repo=get_str(github, "repo")),
            webhook=WebhookConfig(url=get_str(webhook, "url")),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relnotes.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))
