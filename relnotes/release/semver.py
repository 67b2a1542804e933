from __future__ import annotations

import re
from dataclasses import dataclass

from relnotes.release.model import HOTFIX_MARKER

# Unanchored: the triple may sit inside a longer tag name ("v1.2.3-release").
_TRIPLE_RE = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")
_TRAILING_INT_RE = re.compile(r"(\d+)$")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    """MAJOR.MINOR.PATCH triple, ordered numerically major first."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> SemVer | None:
    """Extract the first ``v?N.N.N`` triple embedded in ``text``."""
    m = _TRIPLE_RE.search(text)
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))


@dataclass(frozen=True, slots=True)
class HotfixId:
    base_version: str
    number: int


def parse_hotfix(name: str) -> HotfixId | None:
    """Split ``v1.0.0-hotfix3`` into ``("v1.0.0", 3)``.

    A missing or non-numeric suffix counts as hotfix 1.
    """
    base_version, marker, suffix = name.partition(HOTFIX_MARKER)
    if not marker:
        return None
    return HotfixId(base_version=base_version, number=hotfix_number(suffix))


def hotfix_number(suffix: str) -> int:
    """Trailing integer of the text after the hotfix marker, defaulting to 1."""
    m = _TRAILING_INT_RE.search(suffix)
    return int(m.group(1)) if m else 1
