"""Platform abstraction layer."""

from .process import ProcessError, run

__all__ = ["ProcessError", "run"]
