from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Strategy = Literal["auto", "sequential", "semver", "hotfix"]
WindowKind = Literal["sequential", "semver", "hotfix"]
Category = Literal["features", "improvements", "bugfixes"]

STRATEGIES: tuple[Strategy, ...] = ("auto", "sequential", "semver", "hotfix")
CATEGORIES: tuple[Category, ...] = ("features", "improvements", "bugfixes")

RELEASE_SUFFIX = "-release"
HOTFIX_MARKER = "-hotfix"
TAG_FORMAT_PLACEHOLDER = "{id}"
DEFAULT_TAG_FORMAT = "{id}-release"


@dataclass(frozen=True, slots=True)
class TagRef:
    name: str


@dataclass(frozen=True, slots=True)
class CommitRef:
    """One commit as returned by the hosting API.

    Only the first line of ``message`` is used for classification.
    """

    message: str
    author_name: str


@dataclass(frozen=True, slots=True)
class ParsedCommit:
    type: str
    scope: str
    subject: str


@dataclass(frozen=True, slots=True)
class ClassifiedEntry:
    title: str


type Sections = dict[Category, list[ClassifiedEntry]]


@dataclass(frozen=True, slots=True)
class WindowMeta:
    base_release_tag: str | None = None
    previous_hotfix_tag: str | None = None


@dataclass(frozen=True, slots=True)
class ReleaseWindow:
    """Commit range of one release: everything reachable from ``head`` but not ``base``.

    ``kind`` tells which addressing scheme produced the window, so callers
    branch on it rather than on which resolver they invoked.
    """

    base: str | None
    head: str
    kind: WindowKind
    meta: WindowMeta = field(default_factory=WindowMeta)


@dataclass(frozen=True, slots=True)
class ResolveOptions:
    strategy: Strategy = "auto"
    tag_format: str = DEFAULT_TAG_FORMAT

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(f"unknown strategy: {self.strategy!r}")
        if TAG_FORMAT_PLACEHOLDER not in self.tag_format:
            raise ValueError(f"tag format must contain {TAG_FORMAT_PLACEHOLDER}: {self.tag_format!r}")

    def render_tag(self, identifier: str) -> str:
        return self.tag_format.replace(TAG_FORMAT_PLACEHOLDER, identifier)
