"""Handler for REST API call to provide travel insights for a conversion."""

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

import constants
import metrics
from client import GeminiClientHolder, build_payload
from configuration import MisconfiguredError, configuration
from models.requests import ConversionQuery, InvalidRequestError
from models.responses import ErrorResponse, InsightsResponse
from services.insights import ServiceUnavailableError, resolve

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["insights"])

# all methods are routed here so that the UI receives JSON errors
ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

insights_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Travel insights generated for the conversion",
        "model": InsightsResponse,
    },
    400: {
        "description": "Missing currency data",
        "model": ErrorResponse,
    },
    405: {
        "description": "Method not allowed",
        "model": ErrorResponse,
    },
    500: {
        "description": "Credential is not configured or AI service is unavailable",
        "model": ErrorResponse,
    },
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Construct JSON response with error message."""
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


def insights_response(text: str) -> JSONResponse:
    """Construct JSON response with the model generated text."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=InsightsResponse(result=text).model_dump(),
    )


async def read_payload(request: Request) -> Any:
    """Read JSON body of the request, a missing or broken body reads as empty."""
    try:
        return await request.json()
    except ValueError:
        logger.debug("Request body is not valid JSON")
        return {}


@router.api_route(
    "/insights",
    methods=ALLOWED_METHODS,
    responses=insights_responses,
    response_model=None,
)
async def insights_endpoint_handler(request: Request) -> Response:
    """
    Handle request to the /insights endpoint.

    Validates the conversion query, serves the insight from the cache when
    available and otherwise asks the primary model, falling back to the
    secondary one. Only successful results are cached.

    Returns:
        Response: `{"result": ...}` on success, `{"error": ...}` otherwise.
    """
    # preflight requests
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK)

    if request.method != "POST":
        return error_response(
            status.HTTP_405_METHOD_NOT_ALLOWED, constants.METHOD_NOT_ALLOWED
        )

    try:
        query = ConversionQuery.from_payload(await read_payload(request))
    except InvalidRequestError as e:
        logger.info("Rejecting insights request: %s", e)
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))

    if not configuration.is_loaded():
        logger.error("Configuration is not loaded")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Configuration is not loaded"
        )

    try:
        api_key = configuration.gemini_api_key
    except MisconfiguredError as e:
        logger.error("Unable to call the model: %s", e)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    cache = configuration.insights_cache
    cache_key = cache.construct_key(query.source, query.target, query.amount)
    cached = cache.get(cache_key)
    if cached is not None:
        metrics.insights_cache_hits_total.inc()
        logger.info("Serving %s from cache", cache_key)
        return insights_response(cached)
    metrics.insights_cache_misses_total.inc()

    gemini_config = configuration.gemini_configuration
    try:
        text = await resolve(
            GeminiClientHolder().get_client(),
            gemini_config.primary_model,
            gemini_config.secondary_model,
            api_key,
            build_payload(query.prompt()),
        )
    except ServiceUnavailableError as e:
        logger.error("Unable to generate insights for %s: %s", cache_key, e)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, constants.SERVICE_UNAVAILABLE
        )
    except Exception:  # pylint: disable=broad-exception-caught
        # the UI only understands {"error": ...}
        logger.exception("Unexpected failure generating insights for %s", cache_key)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, constants.SERVICE_UNAVAILABLE
        )

    cache.put(cache_key, text)
    return insights_response(text)
