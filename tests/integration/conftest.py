"""Shared fixtures for integration tests."""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from client import GeminiClient
from configuration import configuration

CONFIG_PATH = Path(__file__).parent.parent / "configuration" / "travel-insights.yaml"

# NOTE: Configuration must be loaded before importing app.main, since
# CORS middleware is configured during import time
configuration.load_configuration(str(CONFIG_PATH))


@pytest.fixture(name="test_config", scope="function")
def test_config_fixture() -> Generator:
    """Load real configuration for integration tests.

    Every test gets a configuration with an empty insights cache.
    """
    configuration.load_configuration(str(CONFIG_PATH))
    yield configuration
    configuration.load_configuration(str(CONFIG_PATH))


@pytest.fixture(name="mock_invoke", scope="function")
def mock_invoke_fixture(mocker):
    """Replace the call to the remote model, everything else stays real."""
    return mocker.patch.object(GeminiClient, "invoke", new_callable=mocker.AsyncMock)


@pytest.fixture(name="client", scope="function")
def client_fixture(test_config) -> Generator[TestClient, None, None]:
    """REST API client running the application lifespan."""
    _ = test_config
    # pylint: disable=import-outside-toplevel
    from app.main import app

    with TestClient(app) as client:
        yield client
