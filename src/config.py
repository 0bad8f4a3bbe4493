"""
Configuration Module
Builds the explicit settings object shared by both pipelines.

Settings are resolved once at startup from environment variables (optionally
loaded from a .env file by the run scripts) and passed to the pipelines.
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

# Environment keys
DATA_PATH_ENV = "DATA_PATH"
OLLAMA_URL_ENV = "CHAT_API_OLLAMA_URL"
TEXT_MODEL_ENV = "CHAT_API_OLLAMA_MODEL_TEXT"
VISION_MODEL_ENV = "CHAT_API_OLLAMA_MODEL_VISION"
TIMEOUT_ENV = "CHAT_API_OLLAMA_TIMEOUT"
DATABASE_URL_ENV = "DATABASE_URL"

SENTIMENT_REQUIRED_KEYS = (DATA_PATH_ENV, OLLAMA_URL_ENV, TEXT_MODEL_ENV)
IMAGE_REQUIRED_KEYS = (DATA_PATH_ENV, OLLAMA_URL_ENV, VISION_MODEL_ENV)


class ConfigurationError(ValueError):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the inference pipelines."""

    data_path: Path
    ollama_url: str
    text_model: Optional[str] = None
    vision_model: Optional[str] = None
    request_timeout: Optional[float] = None
    database_url: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 required: Sequence[str] = SENTIMENT_REQUIRED_KEYS,
                 base_dir: Optional[Path] = None) -> "Settings":
        """Create settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            required: Keys that must be present and non-blank
            base_dir: Directory a relative DATA_PATH is resolved against
                (defaults to the current working directory)

        Returns:
            Settings: Validated settings

        Raises:
            ConfigurationError: If a required key is missing or a value is invalid
        """
        environ = os.environ if environ is None else environ

        def _get(key: str) -> Optional[str]:
            value = environ.get(key)
            if value is None or not str(value).strip():
                return None
            return str(value).strip()

        missing = [key for key in required if _get(key) is None]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )

        timeout = _get(TIMEOUT_ENV)
        if timeout is not None:
            try:
                timeout = float(timeout)
            except ValueError as e:
                raise ConfigurationError(f"{TIMEOUT_ENV} must be a number, got {timeout!r}") from e
            if timeout <= 0:
                raise ConfigurationError(f"{TIMEOUT_ENV} must be positive, got {timeout}")

        data_path = _get(DATA_PATH_ENV)
        resolved_data_path = Path(data_path) if data_path else Path(".")
        if base_dir is not None and not resolved_data_path.is_absolute():
            resolved_data_path = Path(base_dir) / resolved_data_path
        ollama_url = _get(OLLAMA_URL_ENV)

        settings = cls(
            data_path=resolved_data_path,
            ollama_url=ollama_url.rstrip("/") if ollama_url else "",
            text_model=_get(TEXT_MODEL_ENV),
            vision_model=_get(VISION_MODEL_ENV),
            request_timeout=timeout,
            database_url=_get(DATABASE_URL_ENV),
        )
        logger.debug(f"Loaded settings: data_path={settings.data_path}, url={settings.ollama_url}")
        return settings
