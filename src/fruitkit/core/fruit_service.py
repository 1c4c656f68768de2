"""Core fruit service — builds the API URL and delegates to a requester.

The service depends on a :class:`~fruitkit.core.protocols.Requester`
injected at construction time, keeping the core free of any HTTP
library import.

Guarantees
----------
* Exactly one ``requester.get`` call per :meth:`FruitService.fetch`.
* No retries, no caching.
* The requester's response is returned unmodified.
* Only :class:`~fruitkit.exceptions.FetchFailureError` escapes on failure.
"""

from __future__ import annotations

import logging
from typing import Any

from fruitkit.core.protocols import Requester
from fruitkit.exceptions import FetchFailureError

logger = logging.getLogger(__name__)

API_URL_TEMPLATE: str = "http://localhost:3000/api/{database}"
FETCH_ERROR_PREFIX: str = "fetchFruit"


def build_fruit_url(database: str) -> str:
    """Interpolate *database* into :data:`API_URL_TEMPLATE`."""
    return API_URL_TEMPLATE.format(database=database)


class FruitService:
    """Stateless service that fetches a fruit database through a requester.

    Parameters
    ----------
    requester:
        Any object satisfying the :class:`Requester` protocol.
    """

    def __init__(self, requester: Requester) -> None:
        self._requester: Requester = requester

    async def fetch(self, database: str) -> Any:
        """Fetch *database* and return the requester's raw response.

        Raises
        ------
        FetchFailureError
            If the requester raises anything.  The message is
            ``"fetchFruit: <original>"`` and the original exception is
            kept as ``__cause__``.
        """
        url = build_fruit_url(database)
        logger.debug("GET %s", url)
        try:
            return await self._requester.get(url)
        except Exception as exc:
            logger.warning("Fetching %s failed: %s", url, exc)
            raise FetchFailureError(f"{FETCH_ERROR_PREFIX}: {exc}") from exc
