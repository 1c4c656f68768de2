"""String helpers."""

from __future__ import annotations

from fruitkit.exceptions import InvalidTypeError


def capitalize(word: str) -> str:
    """Return *word* with its first character uppercased.

    The remainder of the string is left untouched, so
    ``capitalize("hELLO") == "HELLO"`` and ``capitalize("") == ""``.

    Raises
    ------
    InvalidTypeError
        If *word* is not a ``str``.
    """
    if not isinstance(word, str):
        raise InvalidTypeError("capitalize: not a string")
    return word[:1].upper() + word[1:]
