"""Release window resolution.

Three addressing schemes are supported and all of them produce a
``ReleaseWindow`` tagged with the scheme that built it:

- sequential: tags are taken in the order the hosting API returned them
  (newest first) and the previous ``*-release`` tag bounds the window;
- semver: the nearest lower ``MAJOR.MINOR.PATCH`` release tag bounds it;
- hotfix: the previous hotfix of the same base release bounds it, falling
  back to the base release tag itself.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from relnotes.core.result import Err, Ok, Result
from relnotes.release.errors import ResolutionError
from relnotes.release.model import (
    HOTFIX_MARKER,
    RELEASE_SUFFIX,
    ReleaseWindow,
    ResolveOptions,
    Strategy,
    TagRef,
    WindowKind,
    WindowMeta,
)
from relnotes.release.semver import SemVer, hotfix_number, parse_hotfix, parse_version

type _Resolver = Callable[[Sequence[TagRef], str, ResolveOptions], Result[ReleaseWindow, ResolutionError]]


def select_strategy(identifier: str, strategy: Strategy = "auto") -> WindowKind:
    """Pick the resolution scheme for ``identifier``.

    An explicit strategy always wins; ``auto`` sniffs the identifier shape.
    """
    if strategy != "auto":
        return strategy
    if HOTFIX_MARKER in identifier:
        return "hotfix"
    if parse_version(identifier) is not None:
        return "semver"
    return "sequential"


def resolve_sequential(
    tags: Sequence[TagRef], identifier: str, options: ResolveOptions
) -> Result[ReleaseWindow, ResolutionError]:
    """Bound the release by the next ``*-release`` tag after it in list order.

    Precondition: ``tags`` is reverse-chronological, as the GitHub tags API
    returns it. The order is trusted, not verified.
    """
    current = options.render_tag(identifier)
    names = [t.name for t in tags]
    try:
        pos = names.index(current)
    except ValueError:
        return Err(
            ResolutionError(
                kind="tag_not_found",
                message=f"release tag not found: {current}",
                ref=current,
                hint="push the release tag before generating notes",
            )
        )

    for name in names[pos + 1 :]:
        if name.endswith(RELEASE_SUFFIX):
            return Ok(ReleaseWindow(base=name, head=current, kind="sequential"))

    return Err(
        ResolutionError(
            kind="no_previous_release",
            message=f"no earlier *{RELEASE_SUFFIX} tag after {current}",
            ref=current,
        )
    )


def resolve_semver(
    tags: Sequence[TagRef], identifier: str, options: ResolveOptions
) -> Result[ReleaseWindow, ResolutionError]:
    """Bound the release by the greatest release tag with a lower version."""
    current_version = parse_version(identifier)
    if current_version is None:
        return Err(
            ResolutionError(
                kind="invalid_version_format",
                message=f"not a MAJOR.MINOR.PATCH version: {identifier}",
                ref=identifier,
                hint="expected something like v1.2.3",
            )
        )

    candidates: list[tuple[SemVer, str]] = []
    for tag in tags:
        if not tag.name.endswith(RELEASE_SUFFIX):
            continue
        version = parse_version(tag.name)
        if version is not None and version < current_version:
            candidates.append((version, tag.name))

    if not candidates:
        return Err(
            ResolutionError(
                kind="no_previous_release",
                message=f"no release tag older than {current_version}",
                ref=identifier,
            )
        )

    # max() keeps the first of equal versions, in list order.
    _, base = max(candidates, key=lambda c: c[0])
    return Ok(ReleaseWindow(base=base, head=options.render_tag(identifier), kind="semver"))


def resolve_hotfix(
    tags: Sequence[TagRef], identifier: str, options: ResolveOptions
) -> Result[ReleaseWindow, ResolutionError]:
    """Bound a hotfix by the previous hotfix of the same release, or the release itself.

    The hotfix tag itself usually does not exist yet, so ``head`` is the
    identifier passed through unchanged.
    """
    del options
    hotfix = parse_hotfix(identifier)
    if hotfix is None:
        return Err(
            ResolutionError(
                kind="invalid_version_format",
                message=f"not a hotfix identifier: {identifier}",
                ref=identifier,
                hint=f"expected something like v1.0.0{HOTFIX_MARKER}2",
            )
        )

    names = {t.name for t in tags}
    base_release = f"{hotfix.base_version}{RELEASE_SUFFIX}"
    if base_release not in names:
        return Err(
            ResolutionError(
                kind="base_release_not_found",
                message=f"base release tag not found: {base_release}",
                ref=base_release,
                hint="create the base release tag first",
            )
        )

    prefix = f"{hotfix.base_version}{HOTFIX_MARKER}"
    previous = sorted(
        ((hotfix_number(t.name[len(prefix) :]), t.name) for t in tags if t.name.startswith(prefix)),
        key=lambda h: h[0],
        reverse=True,
    )
    previous_hotfix = next((name for n, name in previous if n < hotfix.number), None)

    return Ok(
        ReleaseWindow(
            base=previous_hotfix or base_release,
            head=identifier,
            kind="hotfix",
            meta=WindowMeta(base_release_tag=base_release, previous_hotfix_tag=previous_hotfix),
        )
    )


_RESOLVERS: dict[WindowKind, _Resolver] = {
    "sequential": resolve_sequential,
    "semver": resolve_semver,
    "hotfix": resolve_hotfix,
}


def resolve(
    tags: Sequence[TagRef],
    identifier: str,
    options: ResolveOptions | None = None,
) -> Result[ReleaseWindow, ResolutionError]:
    """Determine the (base, head) window of the release named by ``identifier``.

    Args:
        tags: Every tag relevant to the release, in hosting-API order.
        identifier: Release identifier such as ``v2``, ``v1.2.0`` or ``v1.0.0-hotfix2``.
        options: Strategy selector and tag format; defaults to auto-detection.

    Returns:
        Ok(ReleaseWindow) or Err(ResolutionError) with an inspectable ``kind``.
    """
    opts = options or ResolveOptions()
    kind = select_strategy(identifier, opts.strategy)
    return _RESOLVERS[kind](tags, identifier, opts)
