#!/usr/bin/env python3
"""
Run the animal image analysis pipeline.

Walks <DATA_PATH>/imatges/animals/<category>/, sends each image to the vision
model with a structured JSON prompt and saves the parsed analyses.

Usage:
    python run_image_analysis.py --max-categories 1
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
    """Log to logs/image_analysis.log and the console."""
    os.makedirs('logs', exist_ok=True)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler('logs/image_analysis.log', mode='a', encoding='utf-8'),
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
    """Main entry point for the image analysis pipeline."""
    parser = argparse.ArgumentParser(description='Analyze animal images with a vision model')
    parser.add_argument(
        '--max-categories',
        type=non_negative_int,
        default=1,
        help='Number of category directories to process (0 = all)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output path (default: <DATA_PATH>/image_analysis.json)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging (includes full server replies)'
    )
    
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    
    from src.config import Settings, IMAGE_REQUIRED_KEYS
    from src.pipelines.image_pipeline import ImagePipeline
    
    try:
        settings = Settings.from_env(required=IMAGE_REQUIRED_KEYS, base_dir=PROJECT_ROOT)
        pipeline = ImagePipeline(settings)
        results = pipeline.run(max_categories=args.max_categories, output_path=args.output)
        
        logger.info("=" * 50)
        logger.info(f"Image analysis completed:")
        logger.info(f"- Images analyzed: {len(results)}")
        logger.info(f"- Parse errors: {sum(1 for r in results if r.parse_error)}")
        logger.info("=" * 50)
        return 0
        
    except Exception as e:
        logger.error(f"Failed to run image analysis: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
