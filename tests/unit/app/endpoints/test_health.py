"""Unit tests for the /health REST API endpoint."""

import pytest
from pytest_mock import MockerFixture

from app.endpoints.health import (
    check_readiness,
    liveness_probe_get_method,
    readiness_probe_get_method,
)
from models.responses import ReadinessResponse


@pytest.fixture(name="mock_client_holder")
def mock_client_holder_fixture(mocker: MockerFixture):
    """Model client holder with the client already loaded."""
    return mocker.patch("app.endpoints.health.GeminiClientHolder")


def test_check_readiness(setup_configuration, mock_client_holder) -> None:
    """Test that service with loaded client and cache is ready."""
    _ = setup_configuration
    _ = mock_client_holder
    assert check_readiness() == (True, "Service is ready")


def test_check_readiness_configuration_not_loaded(mocker: MockerFixture) -> None:
    """Test that service without configuration is not ready."""
    mock_configuration = mocker.patch("app.endpoints.health.configuration")
    mock_configuration.is_loaded.return_value = False

    assert check_readiness() == (False, "Configuration not loaded")


def test_check_readiness_cache_not_ready(
    mocker: MockerFixture, setup_configuration, mock_client_holder
) -> None:
    """Test that service with unusable cache is not ready."""
    _ = mock_client_holder
    mocker.patch.object(setup_configuration.insights_cache, "ready", return_value=False)

    assert check_readiness() == (False, "Insights cache is not ready")


def test_check_readiness_client_not_loaded(
    setup_configuration, mock_client_holder
) -> None:
    """Test that service without model client is not ready."""
    _ = setup_configuration
    mock_client_holder.return_value.get_client.side_effect = RuntimeError(
        "GeminiClient has not been initialised"
    )

    assert check_readiness() == (False, "Model client is not initialised")


@pytest.mark.asyncio
async def test_readiness_probe_success(
    mocker: MockerFixture, setup_configuration, mock_client_holder
) -> None:
    """Test the readiness endpoint handler when service is ready."""
    _ = setup_configuration
    _ = mock_client_holder
    mock_response = mocker.Mock()
    mock_response.status_code = 200

    response = await readiness_probe_get_method(response=mock_response)

    assert isinstance(response, ReadinessResponse)
    assert response.ready is True
    assert response.reason == "Service is ready"
    assert mock_response.status_code == 200


@pytest.mark.asyncio
async def test_readiness_probe_fails(mocker: MockerFixture) -> None:
    """Test the readiness endpoint handler when service is not ready."""
    mocker.patch(
        "app.endpoints.health.check_readiness",
        return_value=(False, "Insights cache is not ready"),
    )
    mock_response = mocker.Mock()

    response = await readiness_probe_get_method(response=mock_response)

    assert response.ready is False
    assert response.reason == "Insights cache is not ready"
    assert mock_response.status_code == 503


@pytest.mark.asyncio
async def test_liveness_probe() -> None:
    """Test the liveness endpoint handler."""
    response = await liveness_probe_get_method()
    assert response is not None
    assert response.alive is True
