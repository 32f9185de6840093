"""Models for REST API responses."""

from pydantic import BaseModel, Field


class InsightsResponse(BaseModel):
    """Model representing travel insights generated by the model.

    Attributes:
        result: JSON encoded travel insight as returned by the model. The text
            might be wrapped in a ```json markdown fence.
    """

    result: str = Field(
        description="JSON encoded travel insight",
        examples=['{"headline": "Sushi and Temples Await"}'],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "result": '{"headline": "Sushi and Temples Await", '
                    '"buy": "A hearty ramen dinner for two.", '
                    '"tip": "Carry cash, many shops do not take cards.", '
                    '"safety": {"score": "9", "note": "Very safe, watch for bikes."}, '
                    '"weather": {"forecast": "Pack layers for cool evenings.", '
                    '"condition": "moderate"}, '
                    '"must_things": {"foods": ["Ramen", "Sushi", "Takoyaki"], '
                    '"places": ["Shibuya", "Asakusa", "Fushimi Inari"]}}'
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Model representing an error returned to the UI.

    Attributes:
        error: Short description of the error.
    """

    error: str = Field(
        description="Short description of the error",
        examples=["AI service temporarily unavailable"],
    )


class InfoResponse(BaseModel):
    """Model representing a response to an info request.

    Attributes:
        name: Service name.
        service_version: Service version.
    """

    name: str = Field(
        description="Service name",
        examples=["travel-insights"],
    )

    service_version: str = Field(
        description="Service version",
        examples=["0.1.0"],
    )


class ReadinessResponse(BaseModel):
    """Model representing response to a readiness request.

    Attributes:
        ready: If service is ready.
        reason: The reason for the readiness.
    """

    ready: bool = Field(
        description="Flag indicating if service is ready",
        examples=[True, False],
    )

    reason: str = Field(
        description="The reason for the readiness",
        examples=["Service is ready"],
    )


class LivenessResponse(BaseModel):
    """Model representing a response to a liveness request.

    Attributes:
        alive: If app is alive.
    """

    alive: bool = Field(
        description="Flag indicating that the app is alive",
        examples=[True, False],
    )

