"""CLI application entry point and command routing for twoptr.

This module is the **sole error boundary** for the application.  It
catches :class:`~twoptr.exceptions.TwoptrError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, renders a short message and returns a
well-defined exit code.

Architecture notes
------------------
* No algorithm lives here; every command delegates to ``twoptr.core``.
* Results go to stdout through :data:`~twoptr.cli.console.output`;
  status and errors go to stderr through
  :data:`~twoptr.cli.console.console`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from twoptr.cli import exit_codes
from twoptr.cli.console import configure_logging, console, output
from twoptr.core.samples import ALGORITHMS
from twoptr.exceptions import TwoptrError
from twoptr.version import __version__

_logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``twoptr three-sum -1 0 1 2 -1 -4``
    * ``twoptr remove-nth -n 2 1 2 3 4 5``
    * ``twoptr palindrome racecar``
    * ``twoptr demo [three-sum|remove-nth|palindrome]``
    * ``twoptr doctor``
    """
    parser = argparse.ArgumentParser(
        prog="twoptr",
        description="Classic two-pointer algorithms on the command line.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging on stderr.",
    )
    sub = parser.add_subparsers(dest="command")

    three_sum = sub.add_parser(
        "three-sum",
        help="List the distinct triplets that sum to zero.",
    )
    three_sum.add_argument(
        "values",
        nargs="*",
        type=int,
        metavar="VALUE",
        help="Integers to search (negative values are allowed).",
    )

    remove_nth = sub.add_parser(
        "remove-nth",
        help="Remove the n-th node from the end of a linked list.",
    )
    remove_nth.add_argument(
        "-n",
        "--position",
        type=int,
        required=True,
        help="1-indexed position counted from the tail.",
    )
    remove_nth.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Fail instead of leaving the list unchanged when n is out of range.",
    )
    remove_nth.add_argument(
        "values",
        nargs="*",
        type=int,
        metavar="VALUE",
        help="Node values from head to tail.",
    )

    palindrome = sub.add_parser(
        "palindrome",
        help="Check whether TEXT reads the same in both directions.",
    )
    palindrome.add_argument(
        "text",
        help=(
            "Text to check, compared character by character as given. "
            "Put `--` before text that starts with '-', e.g. `palindrome -- -a-`."
        ),
    )

    demo = sub.add_parser(
        "demo",
        help="Replay built-in samples (prompts for an algorithm if omitted).",
    )
    demo.add_argument(
        "algorithm",
        nargs="?",
        default=None,
        choices=ALGORITHMS,
    )

    sub.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_three_sum(values: list[int]) -> int:
    from twoptr.core.models import format_triplet
    from twoptr.core.triplets import find_zero_sum_triplets

    triplets = find_zero_sum_triplets(values)
    for triplet in triplets:
        output.print(format_triplet(triplet))
    console.print(f"[dim]{len(triplets)} triplet(s) found.[/dim]")
    return exit_codes.SUCCESS


def _handle_remove_nth(values: list[int], position: int, strict: bool) -> int:
    from twoptr.core.linked_list import remove_nth_from_end
    from twoptr.core.models import build_list, format_list

    head = build_list(values)
    head = remove_nth_from_end(head, position, strict=strict)
    output.print(format_list(head))
    return exit_codes.SUCCESS


def _handle_palindrome(text: str) -> int:
    from twoptr.core.palindrome import is_palindrome

    output.print("true" if is_palindrome(text) else "false")
    return exit_codes.SUCCESS


def _handle_demo(algorithm: str | None) -> int:
    from twoptr.cli.demo import run_demo

    return run_demo(algorithm)


def _handle_doctor() -> int:
    from twoptr.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the twoptr CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    _logger.debug("dispatching command %r", args.command)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS
    if args.command == "three-sum":
        return _handle_three_sum(args.values)
    if args.command == "remove-nth":
        return _handle_remove_nth(args.values, args.position, args.strict)
    if args.command == "palindrome":
        return _handle_palindrome(args.text)
    if args.command == "demo":
        return _handle_demo(args.algorithm)
    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except TwoptrError as exc:
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
