from __future__ import annotations

from pathlib import Path

import typer

from relnotes.cli._helpers import exit_on_error, require_repo, resolve_options
from relnotes.cli.context import build_context
from relnotes.core.result import Err
from relnotes.output.console import Style
from relnotes.services.gh import ensure_gh_auth, ensure_gh_available
from relnotes.services.notes import GhRepoSource, resolve_window


def window(
    identifier: str = typer.Argument(..., help="Release identifier (v2, v1.2.0, v1.0.0-hotfix2)"),
    repo: str | None = typer.Option(None, "--repo", help="GitHub repository (owner/name)"),
    strategy: str | None = typer.Option(
        None, "--strategy", help="auto, sequential, semver or hotfix"
    ),
    tag_format: str | None = typer.Option(
        None, "--tag-format", help="Release tag template with an {id} placeholder"
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to relnotes.toml"),
) -> None:
    """Show the commit window (base...head) of a release."""
    ctx = build_context(config)
    options = resolve_options(ctx, strategy, tag_format)
    repo_name = require_repo(ctx, repo)
    exit_on_error(ensure_gh_available(), ctx)
    exit_on_error(ensure_gh_auth(cwd=Path.cwd()), ctx)

    result = resolve_window(GhRepoSource(repo=repo_name), identifier, options, console=ctx.console)
    exit_on_error(result, ctx)
    if isinstance(result, Err):
        return

    w = result.value
    ctx.console.header(f"{identifier} ({w.kind})")
    ctx.console.print(f"base: {w.base}")
    ctx.console.print(f"head: {w.head}")
    if w.kind == "hotfix":
        ctx.console.print(f"base release: {w.meta.base_release_tag}", Style.DIM)
        ctx.console.print(f"previous hotfix: {w.meta.previous_hotfix_tag or '-'}", Style.DIM)
