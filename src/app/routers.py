"""REST API routers."""

from fastapi import FastAPI

from app.endpoints import (
    health,
    info,
    insights,
    metrics,
)


def include_routers(app: FastAPI) -> None:
    """Include FastAPI routers for different endpoints.

    Args:
        app: The `FastAPI` app instance.
    """
    app.include_router(info.router, prefix="/v1")
    app.include_router(insights.router, prefix="/v1")

    # operational endpoints are not versioned
    app.include_router(health.router)
    app.include_router(metrics.router)
