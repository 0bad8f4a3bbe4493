"""
Data Models Package
Dataclasses shared across the ingestion, inference and output stages.
"""

from .review_models import InferenceRequest, SentimentTally, GameSentiment, ImageAnalysis

__all__ = ['InferenceRequest', 'SentimentTally', 'GameSentiment', 'ImageAnalysis']
