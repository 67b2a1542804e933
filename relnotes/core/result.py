"""Result type for explicit error handling.

Operations that can fail for expected reasons (a missing tag, a bad config
file, a failed API call) return ``Ok(value)`` or ``Err(error)`` instead of
raising. Callers branch on the variant:

    match resolve(tags, "v1.2.0", options):
        case Ok(window):
            print(window.base, window.head)
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
