"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relnotes.core.config import ConfigError
from relnotes.core.errors import ErrorCode
from relnotes.output.console import Style
from relnotes.release.errors import ResolutionError
from relnotes.services.gh import GhError
from relnotes.services.webhook import WebhookError

if TYPE_CHECKING:
    from relnotes.output.console import ConsoleProtocol

__all__ = ["error_exit_code", "print_error"]

type AppError = ResolutionError | GhError | WebhookError | ConfigError


def print_error(error: AppError, console: ConsoleProtocol) -> None:
    """Print an error with the ref or URL it concerns and an operator hint."""
    match error:
        case ResolutionError(kind="tag_not_found", ref=ref, hint=hint):
            console.error(f"tag not found: {ref}")
            if hint:
                console.print(f"hint: {hint}", Style.DIM)
        case ResolutionError(kind="invalid_version_format", ref=ref, hint=hint):
            console.error(f"invalid version format: {ref}")
            if hint:
                console.print(f"hint: {hint}", Style.DIM)
        case ResolutionError(kind="no_previous_release", message=message, ref=ref):
            console.error(f"no previous release for {ref}")
            console.print(message, Style.DIM)
        case ResolutionError(kind="base_release_not_found", ref=ref, hint=hint):
            console.error(f"base release not found: {ref}")
            if hint:
                console.print(f"hint: {hint}", Style.DIM)
        case ResolutionError(message=message):
            console.error(message)
        case GhError(message=message, hint=hint):
            console.error(message)
            if hint:
                console.print(f"hint: {hint}", Style.DIM)
        case WebhookError():
            console.error(f"webhook delivery failed: {error}")
        case ConfigError(message=message):
            console.error(message)


def error_exit_code(error: AppError) -> int:
    match error:
        case ResolutionError():
            return int(ErrorCode.RESOLUTION_ERROR)
        case GhError(kind="gh_missing" | "gh_auth_required"):
            return int(ErrorCode.ENV_ERROR)
        case GhError() | WebhookError():
            return int(ErrorCode.NETWORK_ERROR)
        case ConfigError():
            return int(ErrorCode.USER_ERROR)
    return int(ErrorCode.USER_ERROR)
