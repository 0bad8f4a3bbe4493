"""
Result Parser Module
Recovers structured data from free-text inference server responses.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

# Configure logging
logger = logging.getLogger(__name__)

StructuredResult = Union[Dict[str, Any], List[Any]]


class ResultParser:
    """Parses model responses into structured extraction results."""

    RAW_RESPONSE_KEY = 'raw_response'
    PARSE_ERROR_KEY = 'parse_error'

    @classmethod
    def failure_envelope(cls, response: Optional[str]) -> Dict[str, Any]:
        """Build the sentinel record returned when a response cannot be parsed."""
        return {cls.RAW_RESPONSE_KEY: response, cls.PARSE_ERROR_KEY: True}

    @classmethod
    def is_failure(cls, result: Any) -> bool:
        """Check whether a result is the failure envelope."""
        return (
            isinstance(result, dict)
            and result.get(cls.PARSE_ERROR_KEY) is True
            and set(result) == {cls.RAW_RESPONSE_KEY, cls.PARSE_ERROR_KEY}
        )

    @staticmethod
    def _loads_container(text: str) -> Optional[StructuredResult]:
        """Parse text as JSON, returning None unless it yields a dict or list."""
        try:
            parsed = json.loads(text)
        except (json.JSONDecodeError, TypeError, ValueError, RecursionError):
            return None
        if isinstance(parsed, (dict, list)):
            return parsed
        return None

    @classmethod
    def parse_json_response(cls, response: Optional[str]) -> StructuredResult:
        """Recover JSON from a generative model response.

        The whole response is parsed first. If that fails, the text between the
        first '{' and the last '}' is parsed instead. Prose or code fences
        around a single object are therefore tolerated.

        Args:
            response: Raw text response from the model (may be None or empty)

        Returns:
            The parsed container, or the failure envelope
            {"raw_response": response, "parse_error": True}. Never raises.
        """
        if not isinstance(response, str) or not response:
            if response is not None and not isinstance(response, str):
                logger.warning(f"Unexpected response type: {type(response).__name__}")
            return cls.failure_envelope(response if isinstance(response, str) else None)

        parsed = cls._loads_container(response)
        if parsed is not None:
            return parsed

        first_brace = response.find('{')
        last_brace = response.rfind('}')
        if first_brace != -1 and last_brace > first_brace:
            parsed = cls._loads_container(response[first_brace:last_brace + 1])
            if parsed is not None:
                logger.debug("Recovered JSON object from surrounding text")
                return parsed

        logger.warning(f"Failed to parse JSON from response: {response[:100]}...")
        return cls.failure_envelope(response)


def recover_json(response: Optional[str]) -> StructuredResult:
    """Module-level shortcut for ResultParser.parse_json_response."""
    return ResultParser.parse_json_response(response)
