"""
Image Analyzer
Requests a structured animal description for an image and recovers the JSON reply.
"""

import logging
from typing import Any, Dict, List, Union

from .utils.api_utils import InferenceClient
from .utils.result_parser import ResultParser

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT = """Provide a detailed analysis of the animal in the supplied image.
Respond ONLY with valid JSON (no extra text) following this schema (Catalan keys):
{
    "nom_comu": "",
    "nom_cientific": "",
    "taxonomia": {
        "classe": "",
        "ordre": "",
        "familia": ""
    },
    "habitat": {
        "tipus": [],
        "regioGeografica": [],
        "clima": []
    },
    "dieta": {
        "tipus": "",
        "aliments_principals": []
    },
    "caracteristiques_fisiques": {
        "mida": {
            "altura_mitjana_cm": "",
            "pes_mitja_kg": ""
        },
        "colors_predominants": [],
        "trets_distintius": []
    },
    "estat_conservacio": {
        "classificacio_IUCN": "",
        "amenaces_principals": []
    }
}

Be concise and return only valid JSON that matches the schema.
If a field is unknown, use an empty string or empty array.
Do NOT include any commentary or markdown."""


class ImageAnalyzer:
    """Structured extraction from a single base64-encoded image."""

    def __init__(self, client: InferenceClient, model: str, prompt: str = ANALYSIS_PROMPT):
        if not model:
            raise ValueError("model must be a non-empty string")
        self.client = client
        self.model = model
        self.prompt = prompt
        self.result_parser = ResultParser()

    def analyze(self, image_base64: str) -> Union[Dict[str, Any], List[Any]]:
        """Send the image with the analysis prompt and parse the reply.

        Returns:
            The parsed extraction, or the failure envelope when the server gave
            no usable reply or the reply is not JSON
        """
        response = self.client.generate_text(self.model, self.prompt, images=[image_base64])
        if response is None:
            logger.error("No valid response received for image")
        else:
            logger.debug(f"Model response: {response}")
        return self.result_parser.parse_json_response(response)
