"""
Pipelines Package
The two batch pipelines: review sentiment and image analysis.
"""

from .sentiment_pipeline import SentimentPipeline
from .image_pipeline import ImagePipeline

__all__ = ['SentimentPipeline', 'ImagePipeline']
