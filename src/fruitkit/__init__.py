"""fruitkit — small, testable utilities and a dependency-injected fruit fetcher.

The public helpers are re-exported from :mod:`fruitkit.api`.
"""

from fruitkit.api import capitalize, fetch_fruit, fetch_hello, sample_item
from fruitkit.version import __version__

__all__: list[str] = [
    "__version__",
    "capitalize",
    "fetch_fruit",
    "fetch_hello",
    "sample_item",
]
