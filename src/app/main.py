"""FastAPI application serving travel insights."""

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.routing import Mount, Route, WebSocketRoute

import constants
import metrics
import version
from app import routers
from client import GeminiClientHolder
from configuration import configuration
from log import get_logger

logger = get_logger(__name__)

# Uvicorn workers import this module in separate processes, so the
# configuration has to be read again from the path exported by the CLI
if not configuration.is_loaded():
    configuration.load_configuration(os.environ[constants.CONFIG_PATH_ENV_VAR])

service_name = configuration.configuration.name
logger.info("Creating %s app", service_name)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """
    Prepare the model client and the insights cache.

    Both are process wide, the cache lives as long as the worker process.
    """
    GeminiClientHolder().load(configuration.gemini_configuration)
    cache = configuration.insights_cache
    logger.info("Insights cache %s is ready", type(cache).__name__)

    yield

    logger.info("Shutting down %s", service_name)


app = FastAPI(
    title=f"{service_name} service - OpenAPI",
    summary="Travel insights for currency conversions.",
    description=f"{service_name} service API specification.",
    version=version.__version__,
    servers=[
        {"url": "http://localhost:8080/", "description": "Locally running service"}
    ],
    lifespan=lifespan,
)

cors = configuration.service_configuration.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.allow_origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)


@app.middleware("http")
async def rest_api_metrics(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Count REST API calls and measure their duration."""
    path = request.url.path
    if path not in app_routes_paths:
        return await call_next(request)

    with metrics.response_duration_seconds.labels(path).time():
        response = await call_next(request)

    # /metrics is scraped periodically and would only add noise
    if path != "/metrics":
        metrics.rest_api_calls_total.labels(path, response.status_code).inc()
    return response


routers.include_routers(app)

app_routes_paths = [
    route.path
    for route in app.routes
    if isinstance(route, (Mount, Route, WebSocketRoute))
]
logger.debug("Serving paths: %s", app_routes_paths)
