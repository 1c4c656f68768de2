"""CLI application entry point and command routing for fruitkit.

This module is the **sole error boundary** for the entire application.
It catches :class:`~fruitkit.exceptions.FruitkitError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  helpers and the :mod:`fruitkit.api` facade.
* Asynchronous helpers are driven with :func:`asyncio.run`, one event
  loop per command.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys
from collections.abc import Callable
from typing import Any

from rich.markup import escape

from fruitkit.cli import exit_codes
from fruitkit.cli.console import console, out
from fruitkit.exceptions import FetchFailureError, FruitkitError
from fruitkit.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with one sub-command per helper."""
    parser = argparse.ArgumentParser(
        prog="fruitkit",
        description="Small testable utilities and a fruit API client.",
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
        action="count",
        default=0,
        help="Increase log verbosity (-v for INFO, -vv for DEBUG).",
    )

    sub = parser.add_subparsers(dest="command")

    cap = sub.add_parser("capitalize", help="Uppercase the first letter of a word.")
    cap.add_argument("word")

    sample = sub.add_parser("sample", help="Print one random item.")
    sample.add_argument("items", nargs="+")
    sample.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source for a reproducible pick.",
    )

    sub.add_parser("hello", help="Await the hello-world coroutine.")

    fruit = sub.add_parser("fruit", help="Fetch a database from the local fruit API.")
    fruit.add_argument("database")
    fruit.add_argument(
        "--pick",
        action="store_true",
        help="Print one capitalized fruit from data.fruits instead of the payload.",
    )

    sub.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_capitalize(args: argparse.Namespace) -> int:
    from fruitkit.core.text import capitalize

    out.print(capitalize(args.word), markup=False, highlight=False)
    return exit_codes.SUCCESS


def _handle_sample(args: argparse.Namespace) -> int:
    from fruitkit.core.sampling import sample_item

    rng = random.Random(args.seed) if args.seed is not None else None
    out.print(sample_item(args.items, rng=rng), markup=False, highlight=False)
    return exit_codes.SUCCESS


def _handle_hello(args: argparse.Namespace) -> int:
    from fruitkit.core.hello import fetch_hello

    out.print(asyncio.run(fetch_hello()), markup=False, highlight=False)
    return exit_codes.SUCCESS


def _pick_fruit(response: Any) -> str:
    """Sample one fruit from ``response["data"]["fruits"]`` and capitalize it."""
    from fruitkit.core.sampling import sample_item
    from fruitkit.core.text import capitalize

    try:
        fruits = response["data"]["fruits"]
    except (KeyError, TypeError) as exc:
        raise FruitkitError(
            "Response does not contain a data.fruits list.",
            hint="Check that the database name points at a fruit collection.",
        ) from exc
    return capitalize(sample_item(fruits))


def _handle_fruit(args: argparse.Namespace) -> int:
    """Fetch *database* with the production requester and render the result."""
    from fruitkit.api import fetch_fruit

    try:
        response = asyncio.run(fetch_fruit(args.database))
    except FetchFailureError as exc:
        if exc.hint is None:
            exc.hint = "Is the fruit API running at http://localhost:3000?"
        raise

    if args.pick:
        out.print(_pick_fruit(response), markup=False, highlight=False)
        return exit_codes.SUCCESS

    data = response.get("data", response) if isinstance(response, dict) else response
    if isinstance(data, (dict, list)):
        out.print_json(data=data)
    else:
        out.print(str(data), markup=False, highlight=False)
    return exit_codes.SUCCESS


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from fruitkit.cli.doctor import run_doctor

    return run_doctor()


_HANDLERS: dict[str, Callable[[argparse.Namespace], int]] = {
    "capitalize": _handle_capitalize,
    "sample": _handle_sample,
    "hello": _handle_hello,
    "fruit": _handle_fruit,
    "doctor": _handle_doctor,
}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _setup_logging(verbosity: int) -> None:
    """Configure console logging from settings, raised by ``-v`` flags."""
    from fruitkit.config import load_settings
    from fruitkit.logging import configure_logging

    if verbosity >= 2:
        level: int | str = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = load_settings().log_level
    configure_logging(level)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the fruitkit CLI.

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

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    _setup_logging(args.verbose)
    logger.debug("Dispatching command %r", args.command)
    return _HANDLERS[args.command](args)


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
    except FruitkitError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", highlight=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
