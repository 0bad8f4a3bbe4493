"""
Database module initialization

This package handles persistence of sentiment classifications.
"""

from src.database.models import Base, SentimentAnalysis
from src.database.sentiment_store import SentimentStore

__all__ = ['Base', 'SentimentAnalysis', 'SentimentStore']
