"""Tests for diff input and output formatting.

Tests cover:
- Reading diff content from files and stdin
- JSON, YAML, and text rendering of FileDiff and Status
"""

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import yaml

from hunkreview.domain.diff import FileDiff
from hunkreview.domain.status import Status
from hunkreview.infrastructure.git.diff_io import (
    describe_file,
    format_diff_as_json,
    format_diff_as_text,
    format_diff_as_yaml,
    format_status_as_json,
    format_status_as_text,
    format_status_as_yaml,
    read_diff,
)


SAMPLE_DIFF = """\
diff --git a/src/app.py b/src/app.py
index 1111111..2222222 100644
--- a/src/app.py
+++ b/src/app.py
@@ -3,2 +3,3 @@ def main():
-    old_a
-    old_b
+    new_a
+    new_b
+    new_c
@@ -20,0 +22 @@
+    appended
"""


def sample_diff() -> FileDiff:
    return FileDiff.from_diff_text("src/app.py", SAMPLE_DIFF)


class TestReadDiff(unittest.TestCase):
    def test_reads_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "change.diff"
            path.write_text(SAMPLE_DIFF)
            self.assertEqual(read_diff(str(path)), SAMPLE_DIFF)

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            read_diff("/nonexistent/change.diff")

    def test_reads_stdin(self):
        with patch("sys.stdin", io.StringIO(SAMPLE_DIFF)):
            self.assertEqual(read_diff(), SAMPLE_DIFF)


class TestFileDiffFormatting(unittest.TestCase):
    def test_json(self):
        data = json.loads(format_diff_as_json(sample_diff()))

        self.assertEqual(data["filename"], "src/app.py")
        self.assertFalse(data["deleted"])
        self.assertEqual(len(data["chunks"]), 2)
        self.assertEqual(data["chunks"][0]["old"], {"start": 3, "length": 2, "lines": ["-    old_a", "-    old_b"]})
        self.assertEqual(data["chunks"][1]["old"]["length"], 0)

    def test_yaml_matches_json(self):
        diff = sample_diff()
        self.assertEqual(
            yaml.safe_load(format_diff_as_yaml(diff)), json.loads(format_diff_as_json(diff))
        )

    def test_text(self):
        text = format_diff_as_text(sample_diff())

        self.assertIn("File: src/app.py", text)
        self.assertIn("Total hunks: 2", text)
        self.assertIn("Lines: +4 -2", text)
        self.assertIn("Hunk 1: @@ -3,2 +3,3 @@ def main():", text)
        self.assertIn("  New: lines 22-22 (1 lines)", text)

    def test_text_deleted(self):
        self.assertEqual(
            format_diff_as_text(FileDiff(filename="gone.txt")), "gone.txt: deleted (no hunks)"
        )

    def test_text_empty(self):
        self.assertEqual(format_diff_as_text(FileDiff(filename="")), "Empty diff (no hunks found)")


class TestStatusFormatting(unittest.TestCase):
    def setUp(self):
        self.status = Status(
            staged=[sample_diff()],
            unstaged=[FileDiff(filename="gone.txt")],
        )

    def test_text(self):
        self.assertEqual(
            format_status_as_text(self.status),
            "Staged:\n"
            "  modified: src/app.py (2 hunks)\n"
            "\n"
            "Unstaged:\n"
            "  deleted: gone.txt",
        )

    def test_text_empty_sections(self):
        self.assertEqual(
            format_status_as_text(Status()), "Staged:\n  (none)\n\nUnstaged:\n  (none)"
        )

    def test_json(self):
        data = json.loads(format_status_as_json(self.status))
        self.assertEqual(data["staged"][0]["filename"], "src/app.py")
        self.assertTrue(data["unstaged"][0]["deleted"])

    def test_yaml(self):
        data = yaml.safe_load(format_status_as_yaml(self.status))
        self.assertEqual([d["filename"] for d in data["unstaged"]], ["gone.txt"])

    def test_describe_single_hunk(self):
        diff = FileDiff.from_diff_text(
            "a.py",
            "diff --git a/a.py b/a.py\nindex 1..2\n--- a/a.py\n+++ b/a.py\n@@ -1 +1 @@\n-x\n+y\n",
        )
        self.assertEqual(describe_file(diff), "modified: a.py (1 hunk)")


if __name__ == "__main__":
    unittest.main()
