"""CLI application entry point for ``nybblify``.

This module is the **sole error boundary** for the entire application.
It catches :class:`~nybble.exceptions.NybbleError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No conversion logic lives here; the work is delegated to the core
  codec and the infrastructure file helpers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from nybble.cli import exit_codes
from nybble.cli.console import LOG_LEVELS, configure_logging, console
from nybble.core.convert import convert_bytes
from nybble.core.models import ConversionRequest, Direction, NybbleOrder
from nybble.exceptions import NybbleError
from nybble.infra.files import read_file, write_file
from nybble.version import __version__

_LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``nybblify -i IN -o OUT [-n h|l]``: expand every byte into nybbles
    * ``nybblify -i IN -o OUT -d``: pack nybbles back into bytes
    * ``nybblify --version``
    """
    parser = argparse.ArgumentParser(
        prog="nybblify",
        description=(
            "Replace every byte of a file with two bytes holding "
            "its high and low nybbles."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-i",
        "--infile",
        required=True,
        type=Path,
        help="File to read.",
    )
    parser.add_argument(
        "-o",
        "--outfile",
        required=True,
        type=Path,
        help="File to create or overwrite.",
    )
    parser.add_argument(
        "-n",
        "--nybble-order",
        dest="order",
        default=None,
        metavar="ORDER",
        help="'h…' for high nybble first (default) or 'l…' for low nybble first.",
    )
    parser.add_argument(
        "-d",
        "--denybblify",
        action="store_true",
        help="Combine nybble pairs back into bytes instead of splitting.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Diagnostic verbosity on stderr (default: warning).",
    )
    return parser


def _build_request(args: argparse.Namespace) -> ConversionRequest:
    """Translate parsed arguments into a :class:`ConversionRequest`.

    Raises
    ------
    InvalidOrderSelectorError
        When ``--nybble-order`` does not start with ``h`` or ``l``.
    """
    order = (
        NybbleOrder.HIGH_FIRST
        if args.order is None
        else NybbleOrder.from_selector(args.order)
    )
    direction = Direction.COMBINE if args.denybblify else Direction.SPLIT
    return ConversionRequest(
        infile=args.infile,
        outfile=args.outfile,
        order=order,
        direction=direction,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_convert(request: ConversionRequest) -> int:
    """Read the input file, convert it, and write the output file."""
    _LOG.debug(
        "%s %s -> %s (order=%s)",
        request.direction.value,
        request.infile,
        request.outfile,
        request.order,
    )
    data = read_file(request.infile)
    result = convert_bytes(data, request.order, request.direction)
    write_file(request.outfile, result)

    console.print(
        f"[bold green]{request.direction.value.capitalize()}[/bold green] "
        f"{len(data)} → {len(result)} bytes  "
        f"order={request.order}  {request.outfile}"
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the nybblify CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    request = _build_request(args)
    return _handle_convert(request)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except NybbleError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
