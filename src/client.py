"""Generative language model client retrieval."""

import asyncio
import logging
from typing import Any, Optional

import aiohttp

import constants
from models.config import GeminiConfiguration
from utils.types import Singleton

logger = logging.getLogger(__name__)


class ModelCallError(Exception):
    """Exception raised when a single call to a remote model fails.

    Attributes:
        model: Model identifier.
        status_code: HTTP status code, None when no response was received.
        body: Response body or error description.
    """

    def __init__(self, model: str, status_code: Optional[int], body: str) -> None:
        """Initialize the exception."""
        super().__init__(f"Model {model} failed")
        self.model = model
        self.status_code = status_code
        self.body = body


def extract_text(data: Any) -> str:
    """Extract text of the first candidate from a generateContent response.

    Returns the `{}` sentinel when the response does not contain any text.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return constants.EMPTY_INSIGHT
    if not isinstance(text, str) or not text:
        return constants.EMPTY_INSIGHT
    return text


def build_payload(prompt: str) -> dict[str, Any]:
    """Build generateContent request body for the given prompt."""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {"responseMimeType": constants.RESPONSE_MIME_TYPE},
    }


class GeminiClient:
    """Client issuing generateContent calls to a named model.

    The client never retries, retry policy belongs to the caller.
    """

    def __init__(self, base_url: str, timeout: float) -> None:
        """Initialize the client."""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def model_url(self, model: str) -> str:
        """Return URL of the generateContent method of the given model."""
        return f"{self.base_url}/models/{model}:generateContent"

    async def invoke(self, model: str, api_key: str, payload: dict[str, Any]) -> str:
        """Send the payload to the given model and return the generated text.

        Raises:
            ModelCallError: On non-success HTTP status, network error, timeout
                or a response that can not be decoded.
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.model_url(model),
                    params={"key": api_key},
                    json=payload,
                ) as resp:
                    if resp.status >= 400:
                        body = await resp.text(errors="replace")
                        raise ModelCallError(model, resp.status, body)
                    try:
                        data = await resp.json(content_type=None)
                    except ValueError:
                        logger.warning("Model %s returned malformed JSON", model)
                        data = None
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeError) as e:
            raise ModelCallError(model, None, str(e) or type(e).__name__) from e
        return extract_text(data)


class GeminiClientHolder(metaclass=Singleton):
    """Container for an initialised GeminiClient."""

    _client: Optional[GeminiClient] = None

    def load(self, gemini_config: GeminiConfiguration) -> None:
        """Create the client according to configuration."""
        logger.info(
            "Using generative language API at %s (primary %s, secondary %s)",
            gemini_config.base_url,
            gemini_config.primary_model,
            gemini_config.secondary_model,
        )
        self._client = GeminiClient(gemini_config.base_url, gemini_config.timeout)

    def get_client(self) -> GeminiClient:
        """Return an initialised GeminiClient."""
        if not self._client:
            raise RuntimeError(
                "GeminiClient has not been initialised. Ensure 'load(..)' has been called."
            )
        return self._client
