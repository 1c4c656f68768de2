"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and test
stand-ins must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations.
"""

from __future__ import annotations

from typing import Any, Protocol


class Requester(Protocol):
    """Contract for HTTP ``GET`` backends.

    Any object that implements an awaitable :meth:`get` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).  Tests typically pass a
    :class:`unittest.mock.AsyncMock` or a tiny fake class.
    """

    async def get(self, url: str) -> Any:
        """Issue one ``GET`` for *url* and return the response.

        The response is opaque to the core layer and is handed back to
        the caller unchanged.  Any exception raised here is wrapped by
        :class:`~fruitkit.core.fruit_service.FruitService`.
        """
        ...  # pragma: no cover
