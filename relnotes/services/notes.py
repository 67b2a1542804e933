"""Release-notes pipeline: tags -> window -> commits -> sections -> Markdown.

Any failure aborts the run before anything is delivered.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from relnotes.core.result import Err, Ok, Result
from relnotes.output.console import ConsoleProtocol
from relnotes.release.classifier import classify
from relnotes.release.errors import ResolutionError
from relnotes.release.model import CommitRef, ReleaseWindow, ResolveOptions, Sections, TagRef
from relnotes.release.render import adaptive_card_message, format_release_notes
from relnotes.release.resolver import resolve
from relnotes.services import gh
from relnotes.services.gh import GhError
from relnotes.services.webhook import WebhookClient, WebhookError

type NotesError = ResolutionError | GhError


class RepoSource(Protocol):
    """Where tags and commit ranges come from."""

    def list_tags(self) -> Result[Sequence[TagRef], GhError]: ...

    def diff_commits(self, base: str, head: str) -> Result[Sequence[CommitRef], GhError]: ...


@dataclass(frozen=True, slots=True)
class GhRepoSource:
    repo: str
    cwd: Path = field(default_factory=Path.cwd)

    def list_tags(self) -> Result[Sequence[TagRef], GhError]:
        return gh.list_tags(cwd=self.cwd, repo=self.repo)

    def diff_commits(self, base: str, head: str) -> Result[Sequence[CommitRef], GhError]:
        return gh.diff_commits(cwd=self.cwd, repo=self.repo, base=base, head=head)


@dataclass(frozen=True, slots=True)
class ReleaseNotesRequest:
    identifier: str
    product_name: str
    release_date: str
    options: ResolveOptions = field(default_factory=ResolveOptions)
    link_base_url: str | None = None
    # Ref to diff up to when the window head does not exist yet (hotfix branch).
    compare_head: str | None = None


@dataclass(frozen=True, slots=True)
class ReleaseNotes:
    window: ReleaseWindow
    commit_count: int
    sections: Sections
    markdown: str

    @property
    def entry_count(self) -> int:
        return sum(len(entries) for entries in self.sections.values())


def resolve_window(
    source: RepoSource,
    identifier: str,
    options: ResolveOptions,
    *,
    console: ConsoleProtocol,
) -> Result[ReleaseWindow, NotesError]:
    tags = source.list_tags()
    if isinstance(tags, Err):
        return tags
    console.info(f"{len(tags.value)} tags")

    window = resolve(tags.value, identifier, options)
    if isinstance(window, Err):
        return window
    console.info(f"{window.value.kind} window: {window.value.base}...{window.value.head}")
    return window


def generate_release_notes(
    request: ReleaseNotesRequest,
    *,
    source: RepoSource,
    console: ConsoleProtocol,
) -> Result[ReleaseNotes, NotesError]:
    window = resolve_window(source, request.identifier, request.options, console=console)
    if isinstance(window, Err):
        return window

    base = window.value.base
    if base is None:
        return Err(
            ResolutionError(
                kind="no_previous_release",
                message=f"window has no lower bound: {window.value.head}",
                ref=window.value.head,
            )
        )
    head = request.compare_head or window.value.head

    commits = source.diff_commits(base, head)
    if isinstance(commits, Err):
        return commits
    console.info(f"{len(commits.value)} commits in {base}...{head}")

    sections = classify(commits.value, request.link_base_url)
    markdown = format_release_notes(
        product_name=request.product_name,
        version=request.identifier,
        release_date=request.release_date,
        sections=sections,
    )
    return Ok(
        ReleaseNotes(
            window=window.value,
            commit_count=len(commits.value),
            sections=sections,
            markdown=markdown,
        )
    )


def deliver(
    notes: ReleaseNotes,
    *,
    webhook_url: str,
    client: WebhookClient,
    console: ConsoleProtocol,
) -> Result[None, WebhookError]:
    result = client.post_json(webhook_url, adaptive_card_message(notes.markdown))
    if isinstance(result, Err):
        return result
    console.success(f"release notes posted ({notes.entry_count} entries)")
    return Ok(None)
