# tests/conftest.py
import gzip
import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from genshin_gateway.core.domain.models import UpstreamResponse
from genshin_gateway.core.ports.upstream_client import IUpstreamClient
from genshin_gateway.shared.container import container as app_container

@pytest.fixture(scope="function")
def mock_upstream_client():
    """Returns a mock implementation of the Upstream Client port."""
    client = MagicMock(spec=IUpstreamClient)
    # Async methods must be mocked with AsyncMock
    client.fetch = AsyncMock()
    return client

@pytest.fixture(scope="function")
def container(mock_upstream_client):
    """
    The application container with the upstream client replaced by a mock.
    The API dependencies resolve from this same instance.
    """
    app_container.upstream_client.override(mock_upstream_client)

    yield app_container

    app_container.upstream_client.reset_override()

@pytest.fixture
def sample_artifact():
    """A trimmed genshin-db artifact record."""
    return {
        "id": 15001,
        "name": "Adventurer",
        "rarityList": [1, 2, 3],
        "2pc": "Max HP increased by 1,000.",
        "4pc": "Opening a chest regenerates 30% Max HP over 5s.",
        "images": {"flower": "UI_RelicIcon_10010_4"},
        "version": "1.0",
    }

def _json_response(document, status_code: int = 200) -> UpstreamResponse:
    return UpstreamResponse(status_code=status_code, content=json.dumps(document).encode("utf-8"))

def _gzip_response(raw: bytes, status_code: int = 200) -> UpstreamResponse:
    return UpstreamResponse(status_code=status_code, content=gzip.compress(raw))

@pytest.fixture
def json_response():
    """Factory for an upstream response carrying a JSON document."""
    return _json_response

@pytest.fixture
def gzip_response():
    """Factory for an upstream response carrying a gzipped archive."""
    return _gzip_response
