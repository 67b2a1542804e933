from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import typer

from relnotes.cli._helpers import exit_on_error, exit_with_user_error, require_repo, resolve_options
from relnotes.cli.context import build_context
from relnotes.core.result import Err
from relnotes.output.console import Style
from relnotes.services.gh import ensure_gh_auth, ensure_gh_available
from relnotes.services.notes import GhRepoSource, ReleaseNotesRequest, deliver, generate_release_notes
from relnotes.services.webhook import RealWebhookClient


def _today() -> str:
    return datetime.now(UTC).date().isoformat()


def notes(
    identifier: str = typer.Argument(..., help="Release identifier (v2, v1.2.0, v1.0.0-hotfix2)"),
    repo: str | None = typer.Option(None, "--repo", help="GitHub repository (owner/name)"),
    product: str | None = typer.Option(None, "--product", help="Product name for the title"),
    link_base_url: str | None = typer.Option(
        None, "--link-base-url", help="Issue tracker base URL for ENG-123 style scopes"
    ),
    webhook_url: str | None = typer.Option(
        None,
        "--webhook-url",
        envvar="RELNOTES_WEBHOOK_URL",
        help="Incoming webhook to post the notes to",
    ),
    strategy: str | None = typer.Option(
        None, "--strategy", help="auto, sequential, semver or hotfix"
    ),
    tag_format: str | None = typer.Option(
        None, "--tag-format", help="Release tag template with an {id} placeholder"
    ),
    head_ref: str | None = typer.Option(
        None, "--head-ref", help="Diff up to this ref instead of the window head"
    ),
    release_date: str | None = typer.Option(None, "--date", help="Release date (default: today, UTC)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the notes instead of posting"),
    config: Path | None = typer.Option(None, "--config", help="Path to relnotes.toml"),
) -> None:
    """Generate release notes and post them to the webhook."""
    ctx = build_context(config)
    options = resolve_options(ctx, strategy, tag_format)
    repo_name = require_repo(ctx, repo)
    product_name = product or ctx.config.notes.product_name or repo_name.split("/")[-1]
    target_url = webhook_url or ctx.config.webhook.url
    if not dry_run and not target_url:
        exit_with_user_error(ctx, "no webhook URL given (use --webhook-url or --dry-run)")

    exit_on_error(ensure_gh_available(), ctx)
    exit_on_error(ensure_gh_auth(cwd=Path.cwd()), ctx)

    request = ReleaseNotesRequest(
        identifier=identifier,
        product_name=product_name,
        release_date=release_date or _today(),
        options=options,
        link_base_url=link_base_url or ctx.config.notes.link_base_url,
        compare_head=head_ref,
    )
    result = generate_release_notes(request, source=GhRepoSource(repo=repo_name), console=ctx.console)
    exit_on_error(result, ctx)
    if isinstance(result, Err):
        return

    release_notes = result.value
    if release_notes.entry_count == 0:
        ctx.console.warning(f"no categorized commits among {release_notes.commit_count}")

    if dry_run or target_url is None:
        ctx.console.markdown(release_notes.markdown)
        ctx.console.print("dry-run: nothing posted", Style.DIM)
        return

    delivered = deliver(
        release_notes,
        webhook_url=target_url,
        client=RealWebhookClient(),
        console=ctx.console,
    )
    exit_on_error(delivered, ctx)
