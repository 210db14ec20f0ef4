"""Infrastructure: whole-file reading and writing.

Inputs are read in full and outputs written in one call; there is no
chunked processing.

Rules
-----
* ``OSError`` never escapes; it is mapped to
  :class:`~nybble.exceptions.FileReadError` or
  :class:`~nybble.exceptions.FileWriteError`.
* No ``print()``: callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from nybble.exceptions import FileReadError, FileWriteError

_LOG = logging.getLogger(__name__)


def _reason(exc: OSError) -> str:
    """Return the OS-level explanation for *exc* without the path."""
    return exc.strerror or str(exc)


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Read the entire file at *path*.

    Raises
    ------
    FileReadError
        When the file cannot be opened or read.
    """
    target = Path(path)
    try:
        with target.open("rb") as f:
            data = f.read()
    except FileNotFoundError as exc:
        raise FileReadError(
            f"Unable to open file {target}: {_reason(exc)}",
            path=str(target),
            hint="Check the --infile path.",
        ) from exc
    except OSError as exc:
        raise FileReadError(
            f"Unable to read file {target}: {_reason(exc)}",
            path=str(target),
        ) from exc
    _LOG.debug("read %d bytes from %s", len(data), target)
    return data


def _discard_partial(target: Path) -> None:
    """Remove a half-written output file, logging if that fails too."""
    try:
        target.unlink(missing_ok=True)
    except OSError as exc:
        _LOG.warning("could not remove partial output %s: %s", target, _reason(exc))


def write_file(path: str | os.PathLike[str], data: bytes) -> None:
    """Create or truncate *path* and write *data* to it.

    If writing fails after the file was created, the partial file is
    removed so a failed run never leaves truncated output behind.

    Raises
    ------
    FileWriteError
        When the file cannot be created or fully written.
    """
    target = Path(path)
    try:
        f = target.open("wb")
    except OSError as exc:
        raise FileWriteError(
            f"Couldn't create {target}: {_reason(exc)}",
            path=str(target),
        ) from exc

    try:
        with f:
            f.write(data)
    except OSError as exc:
        _discard_partial(target)
        raise FileWriteError(
            f"Couldn't write to {target}: {_reason(exc)}",
            path=str(target),
        ) from exc
    _LOG.debug("wrote %d bytes to %s", len(data), target)
