"""
Review and Image Data Models
Provides the data structures that flow through both inference pipelines.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union


@dataclass
class InferenceRequest:
    """
    A single request to the inference server's generate endpoint.

    Constructed per call and discarded once the response is read.
    """
    model: str
    prompt: str
    images: Optional[List[str]] = None  # base64-encoded attachments
    stream: bool = False

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body for POST /generate."""
        payload: Dict[str, Any] = {
            'model': self.model,
            'prompt': self.prompt,
            'stream': self.stream,
        }
        if self.images:
            payload['images'] = list(self.images)
        return payload


@dataclass
class SentimentTally:
    """
    Per-game count of classification outcomes.

    Every attempted review lands in exactly one category, so the counts always
    sum to the number of reviews attempted.
    """
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    error: int = 0

    CATEGORIES: ClassVar[Tuple[str, ...]] = ('positive', 'negative', 'neutral', 'error')

    def record(self, category: str) -> None:
        """Increment the counter for a category; unknown values count as error."""
        if category not in self.CATEGORIES:
            category = 'error'
        setattr(self, category, getattr(self, category) + 1)

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral + self.error

    def to_dict(self) -> Dict[str, int]:
        return {category: getattr(self, category) for category in self.CATEGORIES}


@dataclass
class GameSentiment:
    """Aggregate sentiment entry for one game in the report."""
    appid: str
    name: str
    statistics: SentimentTally = field(default_factory=SentimentTally)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'appid': self.appid,
            'name': self.name,
            'statistics': self.statistics.to_dict(),
        }


@dataclass
class ImageAnalysis:
    """Structured extraction result for a single image file."""
    file_name: str
    category: str
    analysis: Union[Dict[str, Any], List[Any]]

    @property
    def parse_error(self) -> bool:
        return isinstance(self.analysis, dict) and self.analysis.get('parse_error') is True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'image': {
                'file_name': self.file_name,
                'category': self.category,
            },
            'analysis': self.analysis,
        }
