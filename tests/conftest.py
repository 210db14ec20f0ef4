"""Shared pytest fixtures and configuration for the nybble test suite.

Guidelines
----------
* Core tests must be pure.
* File I/O only under ``tmp_path``.
* OS failures are injected with ``unittest.mock.patch``, never provoked
  through real permissions.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def sample_file(tmp_path: Path) -> Path:
    """A small input file whose bytes all have differing nybbles."""
    path = tmp_path / "sample.bin"
    path.write_bytes(bytes([0x01, 0x23, 0x45, 0x57, 0x61, 0x76, 0xFE]))
    return path


@pytest.fixture()
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop Rich from wrapping long paths in captured output."""
    monkeypatch.setenv("COLUMNS", "400")
