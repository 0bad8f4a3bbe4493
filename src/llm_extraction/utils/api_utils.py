"""
API Utilities Module
Handles HTTP interactions with the local generative-model inference server.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from src.models.review_models import InferenceRequest

# Configure logging
logger = logging.getLogger(__name__)


class InferenceError(RuntimeError):
    """Raised internally when the server reply cannot be used."""


class InferenceClient:
    """Sends generate requests to an Ollama-compatible inference server.

    Requests are made one at a time and are not retried. Every transport or
    protocol failure is logged and reported to the caller as None.
    """

    GENERATE_PATH = "/generate"

    def __init__(self, base_url: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            base_url: Server base URL (e.g. http://localhost:11434/api)
            timeout: Request timeout in seconds; None keeps the transport default
            session: Optional requests session to reuse connections
        """
        if not base_url or not isinstance(base_url, str):
            raise ValueError("base_url must be a non-empty string")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}{self.GENERATE_PATH}"

    def _post(self, payload: Dict[str, Any]) -> str:
        response = self.session.post(
            self.generate_url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        if not response.ok:
            raise InferenceError(f"HTTP error: {response.status_code} {response.reason}")

        data = response.json()
        logger.debug(f"Full server reply: {data}")

        if not isinstance(data, dict):
            raise InferenceError("Server reply is not a JSON object")
        text = data.get("response")
        if not isinstance(text, str) or not text:
            raise InferenceError("Server reply has no 'response' text")
        return text

    def generate(self, request: InferenceRequest) -> Optional[str]:
        """Send a generate request and return the raw response text.

        Args:
            request: Model, prompt and optional base64 image attachments

        Returns:
            The 'response' text from the server, or None if the call failed
        """
        logger.info(f"Sending request to inference server (model: {request.model})")
        try:
            return self._post(request.to_payload())
        except (requests.RequestException, InferenceError, ValueError) as e:
            images = request.images or []
            logger.error(f"Inference request failed: {type(e).__name__}: {e}")
            logger.error(
                f"Request details: url={self.generate_url}, model={request.model}, "
                f"prompt_length={len(request.prompt)}, images={len(images)}, "
                f"image_length={sum(len(image) for image in images)}"
            )
            return None

    def generate_text(self, model: str, prompt: str, images: Optional[List[str]] = None) -> Optional[str]:
        """Convenience wrapper building the InferenceRequest."""
        return self.generate(InferenceRequest(model=model, prompt=prompt, images=images))
