"""Conventional-commit classification.

Commit subjects are matched against an ordered list of grammars; the first
one that matches wins and anything unmatched falls through to ``other``.
Only commits whose type maps to a category end up in the output.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from relnotes.release.model import (
    CATEGORIES,
    Category,
    ClassifiedEntry,
    CommitRef,
    ParsedCommit,
    Sections,
)

OTHER_TYPE = "other"

COMMIT_TYPE_CATEGORIES: dict[str, Category] = {
    "feat": "features",
    "fix": "bugfixes",
    "perf": "improvements",
    "refactor": "improvements",
    "style": "improvements",
}

# Issue keys such as ENG-123 get linked to the tracker.
_ISSUE_KEY_RE = re.compile(r"[A-Za-z]+-\d+")


@dataclass(frozen=True, slots=True)
class CommitGrammar:
    name: str
    pattern: re.Pattern[str]
    extract: Callable[[re.Match[str]], ParsedCommit]


def _scoped(m: re.Match[str]) -> ParsedCommit:
    return ParsedCommit(type=m["type"], scope=m["scope"], subject=m["subject"])


def _unscoped(m: re.Match[str]) -> ParsedCommit:
    return ParsedCommit(type=m["type"], scope="", subject=m["subject"])


GRAMMARS: tuple[CommitGrammar, ...] = (
    CommitGrammar(
        name="scoped",
        pattern=re.compile(r"^(?P<type>\w+)\((?P<scope>[^()]+)\):\s*(?P<subject>.+)$"),
        extract=_scoped,
    ),
    CommitGrammar(
        name="unscoped",
        pattern=re.compile(r"^(?P<type>\w+):\s*(?P<subject>.+)$"),
        extract=_unscoped,
    ),
)


def first_line(message: str) -> str:
    return message.split("\n", 1)[0]


def parse_commit_message(message: str) -> ParsedCommit:
    """Parse the first line of ``message`` as a conventional commit.

    Never fails: unrecognized messages come back with type ``other``.
    """
    subject = first_line(message)
    for grammar in GRAMMARS:
        m = grammar.pattern.match(subject)
        if m is not None:
            return grammar.extract(m)
    return ParsedCommit(type=OTHER_TYPE, scope="", subject=subject)


def entry_title(parsed: ParsedCommit, author_name: str, link_base_url: str | None) -> str:
    if parsed.scope:
        title = f"{parsed.scope} - {parsed.subject} - {author_name}"
    else:
        title = f"{parsed.subject} - {author_name}"

    if link_base_url is not None and _ISSUE_KEY_RE.fullmatch(parsed.scope):
        return f"[{title}]({link_base_url}/{parsed.scope})"
    return title


def classify(commits: Sequence[CommitRef], link_base_url: str | None = None) -> Sections:
    """Group commits into release-note sections, keeping input order.

    Args:
        commits: Commits in the hosting API's order.
        link_base_url: Issue tracker base URL; scopes like ``ENG-42`` become links.

    Returns:
        A dict with every category key (possibly empty lists), in display order.
    """
    sections: Sections = {category: [] for category in CATEGORIES}
    for commit in commits:
        parsed = parse_commit_message(commit.message)
        category = COMMIT_TYPE_CATEGORIES.get(parsed.type)
        if category is None:
            continue
        title = entry_title(parsed, commit.author_name, link_base_url)
        sections[category].append(ClassifiedEntry(title=title))
    return sections
