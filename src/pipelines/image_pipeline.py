"""
Image Pipeline
Sends each animal image to the vision model and stores the structured replies.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from src.config import Settings, ConfigurationError
from src.data_ingestion.core.reader import FileReader
from src.data_ingestion.utils.file_utils import image_to_base64
from src.llm_extraction.image_analyzer import ImageAnalyzer
from src.llm_extraction.utils.api_utils import InferenceClient
from src.models.review_models import ImageAnalysis
from src.output_generation.file_writer import FileWriter

logger = logging.getLogger(__name__)


class ImagePipeline:
    """Structured image analysis over <data_path>/imatges/animals/<category>/*."""

    IMAGES_SUBFOLDER = Path("imatges") / "animals"
    DEFAULT_MAX_CATEGORIES = 1

    def __init__(self, settings: Settings,
                 client: Optional[InferenceClient] = None,
                 analyzer: Optional[ImageAnalyzer] = None,
                 reader: Optional[FileReader] = None,
                 writer: Optional[FileWriter] = None):
        if analyzer is None:
            if not settings.vision_model:
                raise ConfigurationError("A vision model is required for image analysis")
            client = client or InferenceClient(settings.ollama_url, timeout=settings.request_timeout)
            analyzer = ImageAnalyzer(client, settings.vision_model)

        self.settings = settings
        self.analyzer = analyzer
        self.reader = reader or FileReader()
        self.writer = writer or FileWriter(settings.data_path)

    @property
    def images_path(self) -> Path:
        return self.settings.data_path / self.IMAGES_SUBFOLDER

    def analyze_image(self, category: str, image_path: Path) -> Optional[ImageAnalysis]:
        """Analyze one image; returns None if the file could not be read."""
        image_base64 = image_to_base64(image_path)
        if not image_base64:
            return None

        logger.info(f"Processing image: {image_path}")
        logger.info(f"Base64 size: {len(image_base64)} characters")

        analysis = self.analyzer.analyze(image_base64)
        result = ImageAnalysis(file_name=image_path.name, category=category, analysis=analysis)
        if result.parse_error:
            logger.warning(f"Could not parse analysis for {image_path.name}")
        return result

    def run(self, max_categories: int = DEFAULT_MAX_CATEGORIES,
            output_path: Optional[Union[str, Path]] = None) -> List[ImageAnalysis]:
        """Run the pipeline and write the analyses.

        Args:
            max_categories: Number of category directories to process (0 means all)
            output_path: Output path (defaults to <data_path>/image_analysis.json)

        Raises:
            FileNotFoundError: If the image directory does not exist
            ValueError: If max_categories is negative
        """
        if max_categories < 0:
            raise ValueError(f"max_categories must be 0 or greater, got {max_categories}")

        results = []
        for category, image_path in self.reader.iter_category_images(self.images_path, max_categories):
            result = self.analyze_image(category, image_path)
            if result is not None:
                results.append(result)

        logger.info(f"Analyzed {len(results)} images "
                    f"({sum(1 for r in results if r.parse_error)} with parse errors)")
        self.writer.write_image_analyses(results, output_path)
        return results
