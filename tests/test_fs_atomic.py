import tempfile
import unittest
from pathlib import Path

from junit2md.io.fs import read_bytes, read_text, write_markdown


class TestAtomicWrites(unittest.TestCase):
    def test_write_markdown_is_atomic_and_cleans_temp(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_dir = Path(td) / "out"
            out_path = out_dir / "summary.md"

            written = write_markdown(out_path, "Title\n=====\n\n✓\n")

            self.assertEqual(out_path, written)
            self.assertEqual("Title\n=====\n\n✓\n", read_text(out_path))
            self.assertEqual([], list(out_dir.glob("*.tmp")))

    def test_write_markdown_replaces_existing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_path = Path(td) / "summary.md"
            out_path.write_text("old", encoding="utf-8")

            write_markdown(out_path, "new")

            self.assertEqual("new", read_text(out_path))

    def test_read_bytes_returns_undecoded_content(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "latin1.xml"
            path.write_bytes("caf\xe9".encode("latin-1"))

            self.assertEqual(b"caf\xe9", read_bytes(path))

    def test_read_text_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                read_text(Path(td) / "missing.xml")


if __name__ == "__main__":
    unittest.main()
