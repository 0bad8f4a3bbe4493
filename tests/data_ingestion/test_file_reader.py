"""
Tests for FileReader: CSV reading and image directory traversal.
"""
import tempfile
import unittest
from pathlib import Path

from src.data_ingestion.core.reader import FileReader


class TestReadCsv(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.reader = FileReader()

    def tearDown(self):
        self.tmp.cleanup()

    def test_reads_all_columns_as_strings(self):
        path = self.root / "games.csv"
        path.write_text("appid,name\n00730,Counter-Strike\n570,Dota 2\n", encoding="utf-8")

        df = self.reader.read_file(path)

        self.assertEqual(list(df.columns), ["appid", "name"])
        self.assertEqual(df.iloc[0]["appid"], "00730")
        self.assertEqual(df.iloc[1]["appid"], "570")

    def test_empty_cells_stay_empty_strings(self):
        path = self.root / "reviews.csv"
        path.write_text("id,app_id,content\n1,570,\n", encoding="utf-8")

        df = self.reader.read_file(path)

        self.assertEqual(df.iloc[0]["content"], "")

    def test_latin1_fallback(self):
        path = self.root / "reviews.csv"
        path.write_bytes("id,content\n1,caf\xe9\n".encode("latin-1"))

        df = self.reader.read_file(path)

        self.assertEqual(df.iloc[0]["content"], "caf\xe9")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            self.reader.read_file(self.root / "missing.csv")

    def test_unsupported_format(self):
        for name in ("data.xlsx", "data.tsv"):
            path = self.root / name
            path.write_bytes(b"")
            with self.assertRaises(ValueError):
                self.reader.read_file(path)


class TestImageTraversal(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name) / "animals"
        (self.root / "cats").mkdir(parents=True)
        (self.root / "dogs").mkdir()
        (self.root / "README.txt").write_text("not a category")
        for name in ("a.jpg", "b.PNG", "c.gif", "d.jpeg", "notes.txt"):
            (self.root / "cats" / name).write_bytes(b"img")
        (self.root / "cats" / "nested.jpg").mkdir()
        (self.root / "dogs" / "rex.png").write_bytes(b"img")
        self.reader = FileReader()

    def tearDown(self):
        self.tmp.cleanup()

    def test_category_directories_skip_files(self):
        dirs = self.reader.list_category_directories(self.root)
        self.assertEqual([d.name for d in dirs], ["cats", "dogs"])

    def test_list_images_filters_extensions(self):
        images = self.reader.list_images(self.root / "cats")
        self.assertEqual([p.name for p in images], ["a.jpg", "b.PNG", "c.gif", "d.jpeg"])

    def test_iter_category_images_all(self):
        pairs = list(self.reader.iter_category_images(self.root))
        self.assertEqual(len(pairs), 5)
        self.assertEqual(pairs[-1][0], "dogs")

    def test_iter_category_images_limited(self):
        pairs = list(self.reader.iter_category_images(self.root, max_categories=1))
        self.assertEqual({category for category, _ in pairs}, {"cats"})

    def test_missing_root(self):
        with self.assertRaises(FileNotFoundError):
            self.reader.list_category_directories(self.root / "nope")


if __name__ == '__main__':
    unittest.main()
