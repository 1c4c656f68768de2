"""Custom exception hierarchy for fruitkit.

Every error raised on purpose by fruitkit inherits from
:class:`FruitkitError`.  Failures coming out of an injected requester
(httpx errors, stand-in errors, anything) must never propagate raw past
the fruit service — they are caught and re-raised as
:class:`FetchFailureError`.

Hierarchy
---------
FruitkitError
├── InvalidTypeError      (also a ``TypeError``)
├── EmptySequenceError    (also a ``ValueError``)
├── FetchFailureError
└── ConfigurationError
"""

from __future__ import annotations


class FruitkitError(Exception):
    """Base exception for all fruitkit errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidTypeError(FruitkitError, TypeError):
    """Raised synchronously when a helper receives an input of the wrong type."""


class EmptySequenceError(FruitkitError, ValueError):
    """Raised when sampling from a sequence with no elements."""


# --- Fetching --------------------------------------------------------------

class FetchFailureError(FruitkitError):
    """Raised when the injected requester fails to produce a response.

    The message is always ``"fetchFruit: "`` followed by the string form
    of the original failure.
    """


# --- Configuration ---------------------------------------------------------

class ConfigurationError(FruitkitError):
    """Raised when ``FRUITKIT_*`` settings (environment or ``.env``) are invalid."""
