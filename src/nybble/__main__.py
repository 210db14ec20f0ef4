"""Allow ``python -m nybble`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m nybble`` behaves identically to the ``nybblify`` console
script.
"""

from __future__ import annotations

from nybble.cli.app import cli

if __name__ == "__main__":
    cli()
