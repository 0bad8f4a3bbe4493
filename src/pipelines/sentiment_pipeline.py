"""
Sentiment Pipeline
Classifies the first reviews of the first games and writes an aggregate report.

Steps:
1. Read games.csv and reviews.csv from <data_path>/steamreviews
2. For each selected game, classify its first reviews one at a time
3. Tally positive/negative/neutral/error per game
4. Write the report JSON (overwriting any previous run)
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from sqlalchemy.exc import SQLAlchemyError

from src.config import Settings, ConfigurationError
from src.data_ingestion.core.reader import FileReader
from src.data_ingestion.utils.validation import (
    GAME_ID_FIELDS,
    GAME_NAME_FIELDS,
    REVIEW_CONTENT_FIELDS,
    REVIEW_GAME_ID_FIELDS,
    REVIEW_ID_FIELDS,
    resolve_field,
    validate_dataframe_schema,
)
from src.database.sentiment_store import SentimentStore
from src.llm_extraction.sentiment_classifier import ERROR_SENTIMENT, SentimentClassifier
from src.llm_extraction.utils.api_utils import InferenceClient
from src.models.review_models import GameSentiment
from src.output_generation.file_writer import FileWriter

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class SentimentPipeline:
    """Review sentiment analysis over a bounded subset of games."""

    DATA_SUBFOLDER = "steamreviews"
    GAMES_FILE_NAME = "games.csv"
    REVIEWS_FILE_NAME = "reviews.csv"
    DEFAULT_MAX_GAMES = 2
    DEFAULT_MAX_REVIEWS = 2

    def __init__(self, settings: Settings,
                 client: Optional[InferenceClient] = None,
                 classifier: Optional[SentimentClassifier] = None,
                 reader: Optional[FileReader] = None,
                 writer: Optional[FileWriter] = None,
                 store: Optional[SentimentStore] = None):
        if classifier is None:
            if not settings.text_model:
                raise ConfigurationError("A text model is required for sentiment analysis")
            client = client or InferenceClient(settings.ollama_url, timeout=settings.request_timeout)
            classifier = SentimentClassifier(client, settings.text_model)

        self.settings = settings
        self.classifier = classifier
        self.reader = reader or FileReader()
        self.writer = writer or FileWriter(settings.data_path)
        if store is None and settings.database_url:
            store = SentimentStore(settings.database_url)
        self.store = store

    @property
    def games_path(self) -> Path:
        return self.settings.data_path / self.DATA_SUBFOLDER / self.GAMES_FILE_NAME

    @property
    def reviews_path(self) -> Path:
        return self.settings.data_path / self.DATA_SUBFOLDER / self.REVIEWS_FILE_NAME

    def load_data(self) -> Tuple[List[Record], List[Record]]:
        """Read games and reviews as lists of row dicts.

        Raises:
            FileNotFoundError: If either CSV file is missing
        """
        missing = [str(p) for p in (self.games_path, self.reviews_path) if not p.is_file()]
        if missing:
            raise FileNotFoundError(f"CSV file(s) not found: {', '.join(missing)}")

        games_df = self.reader.read_file(self.games_path)
        reviews_df = self.reader.read_file(self.reviews_path)

        for label, df, fields in (
            ('games', games_df, {'game id': GAME_ID_FIELDS}),
            ('reviews', reviews_df, {'game id': REVIEW_GAME_ID_FIELDS, 'content': REVIEW_CONTENT_FIELDS}),
        ):
            is_valid, errors = validate_dataframe_schema(df, fields)
            if not is_valid:
                logger.warning(f"{label} file: {'; '.join(errors)}")

        logger.info(f"Loaded {len(games_df)} games and {len(reviews_df)} reviews")
        return games_df.to_dict('records'), reviews_df.to_dict('records')

    @staticmethod
    def game_id(game: Record) -> str:
        return str(resolve_field(game, GAME_ID_FIELDS, '')).strip()

    @staticmethod
    def reviews_for_game(reviews: List[Record], appid: str) -> List[Record]:
        """Select the reviews whose game id (app_id, then appid) equals appid."""
        if not appid:
            return []
        return [
            review for review in reviews
            if str(resolve_field(review, REVIEW_GAME_ID_FIELDS, '')).strip() == appid
        ]

    def classify_review(self, review: Record) -> str:
        """Classify one review; any failure is reported as 'error'."""
        review_id = resolve_field(review, REVIEW_ID_FIELDS, 'unknown')
        content = str(resolve_field(review, REVIEW_CONTENT_FIELDS, ''))
        logger.info(f"Processing review: {review_id}")

        try:
            sentiment = self.classifier.classify(content)
        except Exception as e:
            logger.error(f"Error processing review {review_id}: {e}", exc_info=True)
            return ERROR_SENTIMENT

        if self.store is not None:
            try:
                self.store.save(content, sentiment)
            except SQLAlchemyError as e:
                logger.error(f"Could not store sentiment for review {review_id}: {e}")
        return sentiment

    def analyze_game(self, game: Record, reviews: List[Record],
                     max_reviews: Optional[int] = DEFAULT_MAX_REVIEWS) -> GameSentiment:
        """Classify the first max_reviews reviews of a game and tally them."""
        appid = self.game_id(game)
        name = str(resolve_field(game, GAME_NAME_FIELDS, ''))
        logger.info(f"Processing game: {appid} - {name}")

        result = GameSentiment(appid=appid, name=name)
        for review in self.reviews_for_game(reviews, appid)[:max_reviews]:
            result.statistics.record(self.classify_review(review))

        logger.info(f"Statistics for {appid}: {result.statistics.to_dict()}")
        return result

    def run(self, max_games: Optional[int] = DEFAULT_MAX_GAMES,
            max_reviews: Optional[int] = DEFAULT_MAX_REVIEWS,
            output_path: Optional[Union[str, Path]] = None,
            list_games: bool = False) -> List[GameSentiment]:
        """Run the pipeline and write the report.

        Args:
            max_games: Number of games taken from the top of games.csv (None means all)
            max_reviews: Number of reviews classified per game (None means all)
            output_path: Report path (defaults to <data_path>/sentiment_report.json)
            list_games: Log code and name of every game before processing

        Returns:
            List[GameSentiment]: Per-game tallies, in file order

        Raises:
            FileNotFoundError: If either CSV file is missing
            ValueError: If a limit is negative
        """
        for label, limit in (('max_games', max_games), ('max_reviews', max_reviews)):
            if limit is not None and limit < 0:
                raise ValueError(f"{label} must be 0 or greater, got {limit}")

        games, reviews = self.load_data()

        if list_games:
            logger.info("=== Game list ===")
            for game in games:
                logger.info(f"Code: {self.game_id(game)}, Name: {resolve_field(game, GAME_NAME_FIELDS, '')}")

        logger.info(f"=== Sentiment analysis ({max_games or 'all'} games x {max_reviews or 'all'} reviews) ===")
        results = [self.analyze_game(game, reviews, max_reviews) for game in games[:max_games]]

        self.writer.write_sentiment_report(results, output_path)
        return results
