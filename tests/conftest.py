"""Shared pytest fixtures and configuration for the fruitkit test suite.

Guidelines
----------
* No internet access in any test.
* The requester is replaced at the protocol boundary (``AsyncMock`` or a
  fake class) or, for the httpx requester, with ``httpx.MockTransport``.
* Tests must not depend on OS state or ``FRUITKIT_*`` variables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any
from unittest.mock import AsyncMock

import pytest

_FRUITS: tuple[str, ...] = ("apple", "orange", "banana", "pear", "peach")


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip fruitkit env vars and undo CLI logging setup after each test."""
    for name in (
        "FRUITKIT_HTTP_TIMEOUT_SECONDS",
        "FRUITKIT_USER_AGENT",
        "FRUITKIT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    project_logger = logging.getLogger("fruitkit")
    for handler in list(project_logger.handlers):
        project_logger.removeHandler(handler)
    project_logger.setLevel(logging.NOTSET)
    logging.getLogger("httpx").setLevel(logging.NOTSET)


@pytest.fixture
def fruit_names() -> list[str]:
    return list(_FRUITS)


@pytest.fixture
def fruit_payload(fruit_names: list[str]) -> dict[str, Any]:
    """Object the fake requester resolves to."""
    return {"data": {"fruits": fruit_names}}


@pytest.fixture
def fake_request(fruit_payload: dict[str, Any]) -> AsyncMock:
    """Requester stand-in whose ``get`` resolves to :func:`fruit_payload`."""
    requester = AsyncMock()
    requester.get.return_value = fruit_payload
    return requester


@pytest.fixture
def bad_request() -> AsyncMock:
    """Requester stand-in whose ``get`` always fails with ``nar mate``."""
    requester = AsyncMock()
    requester.get.side_effect = Exception("nar mate")
    return requester
