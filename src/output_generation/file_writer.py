"""
File Writer Module
Writes pipeline results as JSON documents.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from src.data_ingestion.utils.file_utils import ensure_directory
from src.models.review_models import GameSentiment, ImageAnalysis

logger = logging.getLogger(__name__)


class FileWriter:
    """Handles writing output files. Existing files are overwritten."""

    SENTIMENT_REPORT_NAME = "sentiment_report.json"
    IMAGE_REPORT_NAME = "image_analysis.json"

    def __init__(self, outputs_dir: Union[str, Path] = "outputs"):
        self.outputs_dir = Path(outputs_dir)

    def _resolve(self, output_path: Optional[Union[str, Path]], default_name: str) -> Path:
        if output_path is None:
            return self.outputs_dir / default_name
        return Path(output_path)

    def write_json(self, data: Any, output_path: Union[str, Path]) -> Path:
        """Write data as indented UTF-8 JSON, creating parent directories."""
        output_path = Path(output_path)
        try:
            ensure_directory(output_path.parent)
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing {output_path}: {str(e)}")
            raise
        logger.info(f"Result saved to: {output_path}")
        return output_path

    def write_sentiment_report(self, games: Iterable[GameSentiment],
                               output_path: Optional[Union[str, Path]] = None,
                               timestamp: Optional[datetime] = None) -> Path:
        """Write the aggregate sentiment report.

        Shape: {"timestamp": ISO-8601, "games": [{"appid", "name", "statistics"}]}
        """
        timestamp = timestamp or datetime.now(timezone.utc)
        report = {
            'timestamp': timestamp.isoformat(),
            'games': [game.to_dict() for game in games],
        }
        return self.write_json(report, self._resolve(output_path, self.SENTIMENT_REPORT_NAME))

    def write_image_analyses(self, analyses: Iterable[ImageAnalysis],
                             output_path: Optional[Union[str, Path]] = None) -> Path:
        """Write the per-image analysis list as {"analyses": [...]}."""
        report = {'analyses': [analysis.to_dict() for analysis in analyses]}
        return self.write_json(report, self._resolve(output_path, self.IMAGE_REPORT_NAME))
