"""Public helpers with production wiring.

This is the module most callers import from::

    from fruitkit.api import capitalize, fetch_fruit, fetch_hello, sample_item

:func:`fetch_fruit` accepts an optional requester.  When none is given,
an :class:`~fruitkit.infra.httpx_requester.HttpxRequester` is built for
that single call.
"""

from __future__ import annotations

from typing import Any

from fruitkit.core.fruit_service import FruitService
from fruitkit.core.hello import fetch_hello
from fruitkit.core.protocols import Requester
from fruitkit.core.sampling import sample_item
from fruitkit.core.text import capitalize
from fruitkit.infra.httpx_requester import HttpxRequester

__all__: list[str] = [
    "capitalize",
    "fetch_fruit",
    "fetch_hello",
    "sample_item",
]


async def fetch_fruit(database: str, requester: Requester | None = None) -> Any:
    """Fetch ``http://localhost:3000/api/{database}`` through *requester*.

    Returns the requester's response unchanged.

    Raises
    ------
    FetchFailureError
        With message ``"fetchFruit: <original>"`` when the request fails.
    """
    if requester is None:
        requester = HttpxRequester()
    return await FruitService(requester).fetch(database)
