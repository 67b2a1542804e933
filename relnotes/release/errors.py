"""Error types for release window resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ResolutionErrorKind = Literal[
    "tag_not_found",
    "invalid_version_format",
    "no_previous_release",
    "base_release_not_found",
]


@dataclass(frozen=True, slots=True)
class ResolutionError:
    """Why no release window could be determined.

    ``ref`` is the tag name or version string that was attempted, so the
    caller can tell the operator exactly what is missing.
    """

    kind: ResolutionErrorKind
    message: str
    ref: str
    hint: str | None = None
