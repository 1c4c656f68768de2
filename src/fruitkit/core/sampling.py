"""Random sampling from ordered collections.

Only genuine sequences are accepted.  Strings and byte strings are
sequences to Python but are rejected here: sampling a character out of a
word is almost always a caller bug.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from fruitkit.exceptions import EmptySequenceError, InvalidTypeError

T = TypeVar("T")

_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


def sample_item(sequence: Sequence[T], *, rng: random.Random | None = None) -> T:
    """Return one element of *sequence* chosen by a uniform random index.

    Parameters
    ----------
    sequence:
        A list, tuple or other :class:`~collections.abc.Sequence`.
    rng:
        Optional random source.  Pass a seeded :class:`random.Random`
        for reproducible picks; the module-level generator is used
        otherwise.

    Raises
    ------
    InvalidTypeError
        If *sequence* is not an ordered, indexable collection.
    EmptySequenceError
        If *sequence* has no elements.
    """
    if not isinstance(sequence, Sequence) or isinstance(sequence, _TEXT_TYPES):
        raise InvalidTypeError("sample_item: not an array")
    if not sequence:
        raise EmptySequenceError("sample_item: empty array")

    source = rng if rng is not None else random
    return sequence[source.randrange(len(sequence))]
