"""
Tests for the image analysis pipeline.
Builds a temporary image tree and mocks the inference client.
"""
import base64
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from src.config import ConfigurationError, Settings
from src.llm_extraction.image_analyzer import ANALYSIS_PROMPT, ImageAnalyzer
from src.pipelines.image_pipeline import ImagePipeline


class TestImageAnalyzer(unittest.TestCase):

    def setUp(self):
        self.client = MagicMock()
        self.analyzer = ImageAnalyzer(self.client, "llava")

    def test_analyze_parses_wrapped_json(self):
        self.client.generate_text.return_value = 'Here you go:\n```json\n{"nom_comu": "Gat"}\n```'

        result = self.analyzer.analyze("aW1n")

        self.assertEqual(result, {"nom_comu": "Gat"})
        self.client.generate_text.assert_called_once_with("llava", ANALYSIS_PROMPT, images=["aW1n"])

    def test_analyze_without_response(self):
        self.client.generate_text.return_value = None
        self.assertEqual(self.analyzer.analyze("aW1n"), {"raw_response": None, "parse_error": True})

    def test_analyze_with_unparseable_response(self):
        self.client.generate_text.return_value = "I cannot see an animal."
        self.assertEqual(
            self.analyzer.analyze("aW1n"),
            {"raw_response": "I cannot see an animal.", "parse_error": True}
        )


class TestImagePipeline(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.data_path = Path(self.tmp.name)
        animals = self.data_path / "imatges" / "animals"
        (animals / "cats").mkdir(parents=True)
        (animals / "dogs").mkdir()
        (animals / "index.txt").write_text("skip me")
        (animals / "cats" / "tom.jpg").write_bytes(b"tom")
        (animals / "cats" / "felix.png").write_bytes(b"felix")
        (animals / "cats" / "notes.md").write_text("skip me")
        (animals / "dogs" / "rex.gif").write_bytes(b"rex")

        self.settings = Settings(
            data_path=self.data_path,
            ollama_url="http://localhost:11434/api",
            vision_model="llava",
        )
        self.client = MagicMock()
        self.pipeline = ImagePipeline(self.settings, analyzer=ImageAnalyzer(self.client, "llava"))

    def tearDown(self):
        self.tmp.cleanup()

    def test_first_category_only_by_default(self):
        self.client.generate_text.side_effect = ['{"nom_comu": "Gat"}', "not json"]

        results = self.pipeline.run()

        self.assertEqual([r.file_name for r in results], ["felix.png", "tom.jpg"])
        self.assertEqual(results[0].analysis, {"nom_comu": "Gat"})
        self.assertTrue(results[1].parse_error)

        sent_image = self.client.generate_text.call_args_list[0].kwargs["images"][0]
        self.assertEqual(base64.b64decode(sent_image), b"felix")

    def test_output_file(self):
        self.client.generate_text.side_effect = ['{"a": 1}', None]

        self.pipeline.run()

        report = json.loads((self.data_path / "image_analysis.json").read_text(encoding="utf-8"))
        self.assertEqual(report, {"analyses": [
            {"image": {"file_name": "felix.png", "category": "cats"}, "analysis": {"a": 1}},
            {"image": {"file_name": "tom.jpg", "category": "cats"},
             "analysis": {"raw_response": None, "parse_error": True}},
        ]})

    def test_all_categories(self):
        self.client.generate_text.return_value = '{"ok": true}'

        results = self.pipeline.run(max_categories=0)

        self.assertEqual([(r.category, r.file_name) for r in results],
                         [("cats", "felix.png"), ("cats", "tom.jpg"), ("dogs", "rex.gif")])

    def test_missing_image_directory_is_fatal(self):
        settings = Settings(data_path=self.data_path / "elsewhere", ollama_url="http://x", vision_model="llava")
        pipeline = ImagePipeline(settings, analyzer=MagicMock())
        with self.assertRaises(FileNotFoundError):
            pipeline.run()

    def test_unreadable_image_is_skipped(self):
        self.client.generate_text.return_value = '{"nom_comu": "Gat"}'

        def read_image(path):
            return None if path.name == "felix.png" else base64.b64encode(b"tom").decode("ascii")

        with patch('src.pipelines.image_pipeline.image_to_base64', side_effect=read_image):
            results = self.pipeline.run()

        self.assertEqual([r.file_name for r in results], ["tom.jpg"])
        self.client.generate_text.assert_called_once()
        report = json.loads((self.data_path / "image_analysis.json").read_text(encoding="utf-8"))
        self.assertEqual([a["image"]["file_name"] for a in report["analyses"]], ["tom.jpg"])

    def test_negative_max_categories_rejected(self):
        with self.assertRaises(ValueError):
            self.pipeline.run(max_categories=-1)
        self.client.generate_text.assert_not_called()
        self.assertFalse((self.data_path / "image_analysis.json").exists())

    def test_requires_vision_model(self):
        settings = Settings(data_path=self.data_path, ollama_url="http://x", text_model="llama3.2")
        with self.assertRaises(ConfigurationError):
            ImagePipeline(settings)


if __name__ == '__main__':
    unittest.main()
