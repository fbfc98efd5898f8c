"""
Shared pytest fixtures for the Gebeta Maps SDK unit tests.

Provides mock transport and logger collaborators so the request pipeline
can be exercised without any network access.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from gebeta_maps.integrations.transport import TransportResponse


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def api_key() -> str:
    return "foo-key"


@pytest.fixture
def config(api_key: str) -> dict[str, Any]:
    return {"api_key": api_key}


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_transport() -> MagicMock:
    """Transport whose ``send`` answers HTTP 200 with a small JSON body.

    Tests can set ``mock_transport.send.return_value`` or
    ``mock_transport.send.side_effect`` to control the outcome.
    """
    transport = MagicMock()
    transport.send = AsyncMock(
        return_value=TransportResponse(status=200, body={"result": "success"})
    )
    return transport


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger capability recording ``info``/``error``/``debug`` calls."""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.error = MagicMock()
    logger.debug = MagicMock()
    return logger


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Run in an empty directory with no ``GEBETA_*`` variables set."""
    for name in ("GEBETA_API_KEY", "GEBETA_TIMEOUT", "GEBETA_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
