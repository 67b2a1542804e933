"""Error codes for CLI exit status.

These values are used as process exit codes and should remain stable:
- 0: Success
- 1: User error (bad option, invalid config file)
- 2: Environment error (gh missing or not authenticated)
- 3: Resolution error (no valid release window)
- 4: Network error (GitHub API or webhook failure)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    RESOLUTION_ERROR = 3
    NETWORK_ERROR = 4
