"""
LLM Extraction Package
Handles sentiment classification and structured image extraction through the inference server.
"""

from .sentiment_classifier import SentimentClassifier, normalize_sentiment
from .image_analyzer import ImageAnalyzer

__all__ = ['SentimentClassifier', 'normalize_sentiment', 'ImageAnalyzer']
