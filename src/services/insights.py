"""Resolve travel insights using a primary and a secondary model."""

from typing import Any

import metrics
from client import GeminiClient, ModelCallError
from log import get_logger
from utils.types import ModelAttempt

logger = get_logger(__name__)


class ServiceUnavailableError(Exception):
    """Both the primary and the secondary model failed."""


async def attempt(
    client: GeminiClient, model: str, api_key: str, payload: dict[str, Any]
) -> str:
    """Call one model, update metrics and log the outcome."""
    logger.info("Trying model %s", model)
    metrics.llm_calls_total.labels(model).inc()
    try:
        text = await client.invoke(model, api_key, payload)
    except ModelCallError as e:
        metrics.llm_calls_failures_total.labels(model).inc()
        logger.debug(
            "Attempt: %s",
            ModelAttempt(
                model=model, outcome="failure", status_code=e.status_code, body=e.body
            ),
        )
        raise
    logger.debug(
        "Attempt: %s", ModelAttempt(model=model, outcome="success", body=text)
    )
    return text


async def resolve(
    client: GeminiClient,
    primary_model: str,
    secondary_model: str,
    api_key: str,
    payload: dict[str, Any],
) -> str:
    """Return text generated by the primary model or, if it fails, the secondary one.

    Every primary failure triggers the fallback regardless of its kind
    (network error, 4xx or 5xx). The secondary model is tried exactly once.

    Raises:
        ServiceUnavailableError: When both attempts fail.
    """
    try:
        return await attempt(client, primary_model, api_key, payload)
    except ModelCallError as e:
        logger.warning("Primary failed with status: %s", e.status_code)

    logger.warning("Switching to backup model %s", secondary_model)
    metrics.llm_fallbacks_total.inc()
    try:
        return await attempt(client, secondary_model, api_key, payload)
    except ModelCallError as e:
        logger.error("Backup failed: %s", e.body or e)
        raise ServiceUnavailableError(
            f"Models {primary_model} and {secondary_model} are unavailable"
        ) from e
