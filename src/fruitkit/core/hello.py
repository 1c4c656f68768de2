"""A contrived asynchronous computation used to exercise async call styles."""

from __future__ import annotations

import asyncio

HELLO_DELAY_SECONDS: float = 0.05
"""Fixed delay before :func:`fetch_hello` resolves."""

HELLO_MESSAGE: str = "hello world"


async def fetch_hello() -> str:
    """Resolve to ``"hello world"`` after :data:`HELLO_DELAY_SECONDS`.

    Never fails.  Await it directly, or schedule it with
    :func:`asyncio.ensure_future` and attach a done-callback.
    """
    await asyncio.sleep(HELLO_DELAY_SECONDS)
    return HELLO_MESSAGE
