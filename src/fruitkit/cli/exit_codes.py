"""Process exit codes returned by :func:`fruitkit.cli.app.main`.

Every exit path in the CLI uses one of these names; tests assert on
them rather than on bare integers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command ran to completion."""

GENERAL_ERROR: int = 1
"""A :class:`~fruitkit.exceptions.FruitkitError` was rendered to stderr."""

UNEXPECTED_ERROR: int = 2
"""Something outside the fruitkit hierarchy escaped the command."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C (128 + SIGINT)."""
