"""
Sentiment Storage Module

Persists individual sentiment classifications to a relational database.
"""

import logging
from typing import List, Optional

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from src.database.models import Base, SentimentAnalysis

# Configure logging
logger = logging.getLogger(__name__)


class SentimentStore:
    """
    Storage handler for sentiment classifications.

    Tables are created on first use. Each save is committed on its own.
    """

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        """
        Initialize the store.

        Args:
            database_url: SQLAlchemy database URL (ignored when engine is given)
            engine: Existing engine to reuse
        """
        if engine is None:
            if not database_url:
                raise ValueError("Either database_url or engine is required")
            engine = create_engine(database_url)
        self.engine = engine
        Base.metadata.create_all(self.engine)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def save(self, text: str, sentiment: Optional[str], score: Optional[float] = None) -> Optional[SentimentAnalysis]:
        """
        Store one classification.

        Returns:
            The stored row, or None when text is empty
        """
        if not text or not text.strip():
            logger.warning("Skipping storage of empty text")
            return None

        record = SentimentAnalysis(text=text, sentiment=sentiment, score=score)
        with self._session_factory() as session:
            session.add(record)
            session.commit()
        logger.debug(f"Stored sentiment record {record.id} ({sentiment})")
        return record

    def list_all(self) -> List[SentimentAnalysis]:
        """Return every stored classification, oldest first."""
        with self._session_factory() as session:
            stmt = select(SentimentAnalysis).order_by(SentimentAnalysis.created_at)
            return list(session.scalars(stmt))

