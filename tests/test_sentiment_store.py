"""
Tests for the SentimentAnalysis model and SentimentStore using in-memory SQLite.
"""
import unittest
import uuid

from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import IntegrityError

from src.database.models import SentimentAnalysis
from src.database.sentiment_store import SentimentStore


class TestSentimentStore(unittest.TestCase):

    def setUp(self):
        self.engine = create_engine("sqlite://")
        self.store = SentimentStore(engine=self.engine)

    def test_table_created(self):
        columns = {c["name"] for c in inspect(self.engine).get_columns("sentiment_analyses")}
        self.assertEqual(columns, {"id", "text", "sentiment", "score", "created_at", "updated_at"})

    def test_save_sets_defaults(self):
        record = self.store.save("Great game", "positive", score=0.9)

        self.assertIsInstance(record.id, uuid.UUID)
        self.assertIsNotNone(record.created_at)
        self.assertIsNotNone(record.updated_at)
        rows = self.store.list_all()
        self.assertEqual(len(rows), 1)
        self.assertEqual((rows[0].text, rows[0].sentiment, rows[0].score), ("Great game", "positive", 0.9))

    def test_empty_text_is_not_stored(self):
        self.assertIsNone(self.store.save("   ", "error"))
        self.assertEqual(self.store.list_all(), [])

    def test_empty_text_rejected_by_schema(self):
        with self.store._session_factory() as session:
            session.add(SentimentAnalysis(text="", sentiment=None))
            with self.assertRaises(IntegrityError):
                session.commit()

    def test_requires_url_or_engine(self):
        with self.assertRaises(ValueError):
            SentimentStore()


if __name__ == '__main__':
    unittest.main()
