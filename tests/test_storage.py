import tempfile
import unittest
from pathlib import Path

from flashdeck.errors import InvalidLineFormatError
from flashdeck.flashcard import Flashcard
from flashdeck.storage import StorageManager


class TestParseLine(unittest.TestCase):
    def test_valid_record(self):
        term, card = StorageManager.parse_line("Term1:Definition1:2")
        self.assertEqual(term, "Term1")
        self.assertEqual(card, Flashcard("Definition1", 2))

    def test_empty_definition_is_allowed(self):
        term, card = StorageManager.parse_line("Term1::0")
        self.assertEqual(card.definition, "")

    def test_wrong_field_counts(self):
        for line in ("Term1:Definition1", "Term2:Definition2:3:Extra", "", "no delimiter"):
            with self.subTest(line=line):
                with self.assertRaises(InvalidLineFormatError) as ctx:
                    StorageManager.parse_line(line, 4)
                self.assertIn("Invalid line format", str(ctx.exception))
                self.assertEqual(ctx.exception.line_number, 4)

    def test_delimiter_inside_definition_is_rejected(self):
        with self.assertRaises(InvalidLineFormatError):
            StorageManager.parse_line("time:12:30:0")

    def test_empty_term_is_rejected(self):
        with self.assertRaises(InvalidLineFormatError):
            StorageManager.parse_line(":Definition1:0")

    def test_mistakes_must_be_non_negative_integer(self):
        for raw in ("-1", "two", "1.5", ""):
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidLineFormatError):
                    StorageManager.parse_line(f"Term1:Definition1:{raw}")

    def test_format_line(self):
        self.assertEqual(
            StorageManager.format_line("Term1", Flashcard("Definition1", 3)),
            "Term1:Definition1:3")


class TestTextFiles(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_load_keeps_file_order(self):
        path = self.dir / "cards.txt"
        path.write_text("b:B:1\na:A:0\nc:C:7\n", encoding="utf-8")
        cards = StorageManager.load_from_text(path)
        self.assertEqual(list(cards), ["b", "a", "c"])
        self.assertEqual(cards["c"], Flashcard("C", 7))

    def test_load_accepts_windows_line_endings(self):
        path = self.dir / "cards.txt"
        path.write_bytes(b"Term1:Definition1:2\r\nTerm2:Definition2:3\r\n")
        cards = StorageManager.load_from_text(path)
        self.assertEqual(cards["Term2"], Flashcard("Definition2", 3))

    def test_load_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            StorageManager.load_from_text(self.dir / "missing.txt")

    def test_load_reports_line_number(self):
        path = self.dir / "cards.txt"
        path.write_text("Term1:Definition1:2\nbroken\n", encoding="utf-8")
        with self.assertRaises(InvalidLineFormatError) as ctx:
            StorageManager.load_from_text(path)
        self.assertEqual(ctx.exception.line_number, 2)
        self.assertEqual(ctx.exception.line, "broken")

    def test_save_writes_one_record_per_line(self):
        path = self.dir / "out.txt"
        cards = {"Term1": Flashcard("Definition1", 2), "Term2": Flashcard("Definition2")}
        self.assertEqual(StorageManager.save_to_text(cards, path), 2)
        self.assertEqual(path.read_text(encoding="utf-8"),
                         "Term1:Definition1:2\nTerm2:Definition2:0\n")

    def test_save_empty_collection_writes_empty_file(self):
        path = self.dir / "out.txt"
        self.assertEqual(StorageManager.save_to_text({}, path), 0)
        self.assertEqual(path.read_bytes(), b"")

    def test_save_to_missing_directory(self):
        with self.assertRaises(OSError):
            StorageManager.save_to_text({}, self.dir / "missing" / "out.txt")

    def test_load_rejects_invalid_utf8(self):
        path = self.dir / "cards.txt"
        path.write_bytes(b"Term0:Definition0:0\nTerm1:\xff\xfe:1\n")
        with self.assertRaises(InvalidLineFormatError) as ctx:
            StorageManager.load_from_text(path)
        self.assertIn("Invalid line format", str(ctx.exception))
        self.assertIn("UTF-8", str(ctx.exception))
        self.assertEqual(ctx.exception.line_number, 2)
        self.assertTrue(ctx.exception.line.startswith("Term1:"))

    def test_unicode_survives(self):
        path = self.dir / "out.txt"
        StorageManager.save_to_text({"Straße": Flashcard("улица", 1)}, path)
        self.assertEqual(StorageManager.load_from_text(path),
                         {"Straße": Flashcard("улица", 1)})


if __name__ == '__main__':
    unittest.main()
