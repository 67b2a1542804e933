"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from relnotes.core.errors import ErrorCode
from relnotes.core.result import Err, Result
from relnotes.output.errors import AppError, error_exit_code, print_error
from relnotes.release.model import STRATEGIES, ResolveOptions, Strategy

if TYPE_CHECKING:
    from relnotes.cli.context import CLIContext


def exit_on_error[T](result: Result[T, AppError], ctx: CLIContext) -> None:
    """Print the error and exit with its mapped code if result is Err."""
    if isinstance(result, Err):
        print_error(result.error, ctx.console)
        raise typer.Exit(code=error_exit_code(result.error))


def exit_with_user_error(ctx: CLIContext, message: str) -> NoReturn:
    ctx.console.error(message)
    raise typer.Exit(code=int(ErrorCode.USER_ERROR))


def require_repo(ctx: CLIContext, repo: str | None) -> str:
    value = repo or ctx.config.github.repo
    if not value:
        exit_with_user_error(ctx, "no repository given (use --repo or [github] repo)")
    return value


def resolve_options(ctx: CLIContext, strategy: str | None, tag_format: str | None) -> ResolveOptions:
    """Merge CLI options over the [release] config table."""
    chosen = strategy or ctx.config.release.strategy
    if chosen not in STRATEGIES:
        exit_with_user_error(ctx, f"unknown strategy: {chosen} (choose from {', '.join(STRATEGIES)})")

    strategy_value: Strategy = chosen  # type: ignore[assignment]
    try:
        return ResolveOptions(
            strategy=strategy_value,
            tag_format=tag_format or ctx.config.release.tag_format,
        )
    except ValueError as e:
        exit_with_user_error(ctx, str(e))
