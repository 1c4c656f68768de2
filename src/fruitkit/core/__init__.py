"""Core / service layer — pure helpers and fetch orchestration.

Rules
-----
* No ``print()`` calls.
* No direct network I/O — HTTP goes through an injected requester.
* No imports from ``cli`` or ``infra``.
"""

from fruitkit.core.fruit_service import FruitService, build_fruit_url
from fruitkit.core.hello import fetch_hello
from fruitkit.core.protocols import Requester
from fruitkit.core.sampling import sample_item
from fruitkit.core.text import capitalize

__all__: list[str] = [
    "FruitService",
    "Requester",
    "build_fruit_url",
    "capitalize",
    "fetch_hello",
    "sample_item",
]
