#!/usr/bin/env python3
"""
Run the review sentiment pipeline.

Reads <DATA_PATH>/steamreviews/games.csv and reviews.csv, classifies the first
reviews of the first games with the text model and writes an aggregate report.

Usage:
    python run_sentiment_analysis.py --max-games 2 --max-reviews 2
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent


def configure_logging(verbose: bool = False):
    """Log to logs/sentiment.log and the console."""
    os.makedirs('logs', exist_ok=True)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler('logs/sentiment.log', mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )


def non_negative_int(value):
    """argparse type for limits: an integer >= 0."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def main(argv=None):
    """Main entry point for the sentiment pipeline."""
    parser = argparse.ArgumentParser(description='Classify review sentiment per game')
    parser.add_argument(
        '--max-games',
        type=non_negative_int,
        default=2,
        help='Number of games to process from the top of games.csv (0 = all)'
    )
    parser.add_argument(
        '--max-reviews',
        type=non_negative_int,
        default=2,
        help='Number of reviews to classify per game (0 = all)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Report path (default: <DATA_PATH>/sentiment_report.json)'
    )
    parser.add_argument(
        '--list-games',
        action='store_true',
        help='Log the code and name of every game before processing'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging (includes full server replies)'
    )
    
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    
    from src.config import Settings, SENTIMENT_REQUIRED_KEYS
    from src.pipelines.sentiment_pipeline import SentimentPipeline
    
    try:
        settings = Settings.from_env(required=SENTIMENT_REQUIRED_KEYS, base_dir=PROJECT_ROOT)
        pipeline = SentimentPipeline(settings)
        
        results = pipeline.run(
            max_games=args.max_games or None,
            max_reviews=args.max_reviews or None,
            output_path=args.output,
            list_games=args.list_games
        )
        
        logger.info("=" * 50)
        logger.info(f"Sentiment analysis completed:")
        logger.info(f"- Games processed: {len(results)}")
        logger.info(f"- Reviews classified: {sum(r.statistics.total for r in results)}")
        logger.info(f"- Errors: {sum(r.statistics.error for r in results)}")
        logger.info("=" * 50)
        return 0
        
    except Exception as e:
        logger.error(f"Failed to run sentiment analysis: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
