"""Infrastructure layer — external system integration.

This layer wraps all interaction with the network.  It may raise the
underlying library's exceptions; the core fruit service wraps them.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from fruitkit.infra.httpx_requester import HttpxRequester, build_async_client

__all__: list[str] = [
    "HttpxRequester",
    "build_async_client",
]
