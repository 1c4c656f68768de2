"""Shared Rich consoles for the CLI layer.

Results go to stdout so they can be piped; diagnostics, errors and
hints go to stderr.
"""

from __future__ import annotations

from rich.console import Console

console = Console(stderr=True)
"""Console for status, errors and the doctor table."""

out = Console()
"""Console for command results."""
