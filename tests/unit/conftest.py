"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import copy

import pytest

from configuration import AppConfig
from tests.unit import config_dict


@pytest.fixture(name="setup_configuration", scope="function")
def setup_configuration_fixture():
    """Set up configuration with fresh in-memory cache for tests.

    Returns:
        AppConfig: the (singleton) configuration initialized from test values.
    """
    cfg = AppConfig()
    cfg.init_from_dict(copy.deepcopy(config_dict))
    yield cfg
    # leave configuration loaded for modules imported later
    cfg.init_from_dict(copy.deepcopy(config_dict))


@pytest.fixture(name="mock_gemini_client", scope="function")
def mock_gemini_client_fixture(mocker):
    """Prepare mock for the model client used by the insights endpoint.

    Returns:
        AsyncMock: client whose `invoke` method can be configured by tests.
    """
    mock_client = mocker.AsyncMock()
    mock_holder_class = mocker.patch("app.endpoints.insights.GeminiClientHolder")
    mock_holder_class.return_value.get_client.return_value = mock_client
    yield mock_client
