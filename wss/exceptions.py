"""Error types raised by the wss package and handled in run_wss.main()."""
from pathlib import Path
from typing import Optional


class WssError(Exception):
    """Base class for every error that ends a run with a diagnostic."""


class ConfigurationError(WssError):
    """Bad arguments or settings. Raised before any measurement I/O."""


class TargetUnavailableError(WssError):
    """The target's proc files could not be used (exited, no permission, old kernel)."""

    def __init__(self, pid: int, path: Optional[Path], message: str, cause: Optional[OSError] = None):
        self.pid = pid
        self.path = path
        self.cause = cause
        super().__init__(message)
