import os
import tempfile
import unittest

import pathio


class TestPublicAPI(unittest.TestCase):
    def test_exports(self):
        """Everything in __all__ is importable from the package root."""
        for name in pathio.__all__:
            self.assertTrue(hasattr(pathio, name), name)

    def test_build_path_then_read(self):
        with tempfile.TemporaryDirectory() as tmp:
            os.mkdir(os.path.join(tmp, "folder"))
            path = pathio.join_path(tmp, "folder", "file.txt")
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write("hello\nworld\n")

            self.assertEqual(pathio.read_file_text(path), "hello\nworld\n")
            self.assertEqual(pathio.read_file_lines(path), ["hello\n", "world\n"])
            self.assertEqual(pathio.dirname(path), os.path.join(tmp, "folder"))
            self.assertEqual(
                pathio.resolve_real_path(tmp, "folder", "file.txt"),
                os.path.realpath(path),
            )


if __name__ == "__main__":
    unittest.main()
