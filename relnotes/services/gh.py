"""GitHub access through the ``gh`` CLI.

Only read endpoints are used: the tag list and the compare API. Transient
failures (timeouts, 5xx, rate limiting) are retried with a linear back-off.
"""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass
from pathlib import Path
from time import sleep
from typing import Literal

from relnotes.core.result import Err, Ok, Result
from relnotes.core.structured import as_str_dict, get_raw_str, get_str, get_table
from relnotes.platform.process import ProcessError
from relnotes.platform.process import run as run_process
from relnotes.release.model import CommitRef, TagRef

GH_TIMEOUT_SECONDS = 60.0
GH_READ_RETRY_ATTEMPTS = 3
GH_READ_RETRY_DELAY_SECONDS = 2.0

UNKNOWN_AUTHOR = "unknown"

GhErrorKind = Literal["gh_missing", "gh_auth_required", "api_failed", "invalid_payload"]


@dataclass(frozen=True, slots=True)
class GhError:
    kind: GhErrorKind
    message: str
    hint: str | None = None


def _is_transient_gh_error(error: ProcessError) -> bool:
    text = f"{error.stderr}\n{error.stdout}".lower()
    markers = (
        "timed out",
        "timeout",
        "connection reset",
        "connection refused",
        "temporarily unavailable",
        "service unavailable",
        "bad gateway",
        "gateway timeout",
        "http 429",
        "http 500",
        "http 502",
        "http 503",
        "http 504",
    )
    return any(marker in text for marker in markers)


def run_gh_read(
    *,
    cwd: Path,
    cmd: list[str],
    message: str,
    timeout: float = GH_TIMEOUT_SECONDS,
    retry_attempts: int = GH_READ_RETRY_ATTEMPTS,
) -> Result[str, GhError]:
    attempts = max(1, retry_attempts)
    for attempt in range(attempts):
        result = run_process(cmd, cwd=cwd, timeout=timeout)
        if isinstance(result, Ok):
            return result

        error = result.error
        if attempt < attempts - 1 and _is_transient_gh_error(error):
            sleep(GH_READ_RETRY_DELAY_SECONDS * (attempt + 1))
            continue

        return Err(GhError(kind="api_failed", message=message, hint=error.stderr.strip() or None))

    return Err(GhError(kind="api_failed", message=message))


def ensure_gh_available() -> Result[None, GhError]:
    if shutil.which("gh") is None:
        return Err(
            GhError(
                kind="gh_missing",
                message="gh: missing",
                hint="Install GitHub CLI: https://cli.github.com/",
            )
        )
    return Ok(None)


def ensure_gh_auth(*, cwd: Path) -> Result[None, GhError]:
    result = run_process(["gh", "auth", "status"], cwd=cwd, timeout=GH_TIMEOUT_SECONDS)
    if isinstance(result, Err):
        return Err(
            GhError(
                kind="gh_auth_required",
                message="gh auth required",
                hint="Run: gh auth login (or set GH_TOKEN)",
            )
        )
    return Ok(None)


def list_tags(*, cwd: Path, repo: str) -> Result[list[TagRef], GhError]:
    """All tags of ``repo`` in API order (newest first), across every page."""
    endpoint = f"repos/{repo}/tags?per_page=100"
    result = run_gh_read(
        cwd=cwd,
        cmd=["gh", "api", "--paginate", "--jq", ".[].name", endpoint],
        message=f"failed to list tags: {repo}",
    )
    if isinstance(result, Err):
        return result

    return Ok([TagRef(name=line.strip()) for line in result.value.splitlines() if line.strip()])


def _decode_json_stream(text: str) -> list[object]:
    """Decode consecutive JSON values, as ``gh api --jq`` emits one per result."""
    decoder = json.JSONDecoder()
    values: list[object] = []
    pos = 0
    while True:
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text):
            return values
        value, pos = decoder.raw_decode(text, pos)
        values.append(value)


def parse_compare_commits(items: list[object]) -> list[CommitRef]:
    """Commit entries of the compare API; entries without a message are skipped."""
    out: list[CommitRef] = []
    for item in items:
        d = as_str_dict(item)
        if d is None:
            continue
        commit_tbl = get_table(d, "commit")
        if commit_tbl is None:
            continue
        msg = get_raw_str(commit_tbl, "message")
        if msg is None:
            continue

        author = UNKNOWN_AUTHOR
        author_tbl = get_table(commit_tbl, "author")
        if author_tbl is not None:
            author = get_str(author_tbl, "name") or UNKNOWN_AUTHOR

        out.append(CommitRef(message=msg, author_name=author))

    return out


def diff_commits(*, cwd: Path, repo: str, base: str, head: str) -> Result[list[CommitRef], GhError]:
    """Commits reachable from ``head`` but not ``base``, in API order, across every page."""
    endpoint = f"repos/{repo}/compare/{base}...{head}?per_page=100"
    result = run_gh_read(
        cwd=cwd,
        cmd=["gh", "api", "--paginate", "--jq", ".commits[]", endpoint],
        message=f"failed to compare {base}...{head}: {repo}",
    )
    if isinstance(result, Err):
        return result

    try:
        items = _decode_json_stream(result.value)
    except json.JSONDecodeError as e:
        return Err(
            GhError(
                kind="invalid_payload",
                message=f"gh api returned invalid JSON: {e}",
                hint=endpoint,
            )
        )

    return Ok(parse_compare_commits(items))
