"""Common types for the project."""

from typing import Literal, Optional

from pydantic import BaseModel


class Singleton(type):
    """Metaclass for Singleton support."""

    _instances = {}  # type: ignore

    def __call__(cls, *args, **kwargs):  # type: ignore
        """Ensure a single instance is created."""
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]


class ModelAttempt(BaseModel):
    """Outcome of one call to a remote model, used for diagnostics only.

    Attributes:
        model: Model identifier.
        outcome: Either "success" or "failure".
        status_code: HTTP status code of a failed call, None for network errors.
        body: Response text, error body or error description.
    """

    model: str
    outcome: Literal["success", "failure"]
    status_code: Optional[int] = None
    body: str = ""
