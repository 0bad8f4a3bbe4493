"""
Sentiment Classifier
Classifies a review text as positive, negative or neutral with a single model call.
"""

import logging
import string
from typing import Optional

from .utils.api_utils import InferenceClient

logger = logging.getLogger(__name__)

VALID_SENTIMENTS = frozenset({'positive', 'negative', 'neutral'})
ERROR_SENTIMENT = 'error'

# Stripped from both ends of the answer before matching, e.g. "Positive." or '"neutral"'
_ANSWER_STRIP_CHARS = string.whitespace + string.punctuation


def normalize_sentiment(answer: Optional[str]) -> str:
    """Map a raw model answer onto one of the sentiment categories.

    The answer is trimmed, lower-cased and stripped of surrounding punctuation.
    Anything that is not exactly one of the valid sentiments maps to 'error'.
    """
    if not isinstance(answer, str):
        return ERROR_SENTIMENT
    word = answer.strip(_ANSWER_STRIP_CHARS).lower()
    if word in VALID_SENTIMENTS:
        return word
    return ERROR_SENTIMENT


class SentimentClassifier:
    """Single-word sentiment classification through the inference server."""

    PROMPT_TEMPLATE = (
        'Analyze the sentiment of this text and respond with only one word '
        '(positive/negative/neutral): "{text}"'
    )

    def __init__(self, client: InferenceClient, model: str):
        if not model:
            raise ValueError("model must be a non-empty string")
        self.client = client
        self.model = model

    def create_prompt(self, text: str) -> str:
        return self.PROMPT_TEMPLATE.format(text=text)

    def classify(self, text: str) -> str:
        """Classify one text.

        Returns:
            'positive', 'negative', 'neutral', or 'error' when the call fails or
            the answer is not one of those words
        """
        response = self.client.generate_text(self.model, self.create_prompt(text or ''))
        if response is None:
            return ERROR_SENTIMENT

        sentiment = normalize_sentiment(response)
        if sentiment == ERROR_SENTIMENT:
            logger.warning(f"Unexpected sentiment answer: {response[:50]!r}")
        else:
            logger.info(f"Sentiment: {sentiment}")
        return sentiment
