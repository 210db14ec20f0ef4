"""Custom exception hierarchy for nybble.

All exceptions that cross layer boundaries must inherit from
:class:`NybbleError`.  Raw ``OSError`` instances must NEVER propagate
beyond the infrastructure layer; they are caught and re-raised as a
typed subclass defined here.

Hierarchy
---------
NybbleError
├── InvalidLengthError
├── InvalidNybbleError
├── InvalidOrderSelectorError
├── MissingDependencyError
└── FileAccessError
    ├── FileReadError
    └── FileWriteError
"""

from __future__ import annotations


class NybbleError(Exception):
    """Base exception for all nybble errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Codec -----------------------------------------------------------------

class InvalidLengthError(NybbleError, ValueError):
    """Raised when a nybble buffer to combine has an odd length."""


class InvalidNybbleError(NybbleError, ValueError):
    """Raised when a nybble value falls outside ``0..15``."""


# --- Configuration ---------------------------------------------------------

class InvalidOrderSelectorError(NybbleError, ValueError):
    """Raised when a nybble order selector string is not recognised."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(NybbleError):
    """Raised when a required runtime library cannot be imported."""


# --- File access -----------------------------------------------------------

class FileAccessError(NybbleError):
    """Raised when an input or output file cannot be used.

    Attributes
    ----------
    path:
        The filesystem path that failed, as given by the caller.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.path: str = path


class FileReadError(FileAccessError):
    """Raised when the input file cannot be opened or read."""


class FileWriteError(FileAccessError):
    """Raised when the output file cannot be created or written."""
