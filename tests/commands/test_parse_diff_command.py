"""Tests for the parse-diff command.

Tests cover:
- Parsing from an input file and from stdin
- Output format selection
- Exit codes and stderr messages for unreadable or malformed input
"""

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import yaml

from hunkreview.commands.parse_diff import cmd_parse_diff


SAMPLE_DIFF = """\
diff --git a/lib/util.py b/lib/util.py
index 1111111..2222222 100644
--- a/lib/util.py
+++ b/lib/util.py
@@ -7 +7,2 @@ def helper():
-    return 1
+    value = 2
+    return value
"""


class TestCmdParseDiff(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.diff_path = Path(self.tmp.name) / "util.diff"
        self.diff_path.write_text(SAMPLE_DIFF)

    def tearDown(self):
        self.tmp.cleanup()

    def run_command(self, **kwargs) -> tuple[int, str, str]:
        with patch("sys.stdout", new_callable=io.StringIO) as out, patch(
            "sys.stderr", new_callable=io.StringIO
        ) as err:
            code = cmd_parse_diff(**kwargs)
        return code, out.getvalue(), err.getvalue()

    def test_json_from_file(self):
        code, out, _ = self.run_command(
            input_file=str(self.diff_path), filename="lib/util.py"
        )

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["filename"], "lib/util.py")
        self.assertEqual(data["chunks"][0]["old"]["lines"], ["-    return 1"])
        self.assertEqual(len(data["chunks"][0]["new"]["lines"]), 2)

    def test_filename_defaults_to_input_path(self):
        _, out, _ = self.run_command(input_file=str(self.diff_path))
        self.assertEqual(json.loads(out)["filename"], str(self.diff_path))

    def test_reads_stdin(self):
        with patch("sys.stdin", io.StringIO(SAMPLE_DIFF)):
            code, out, _ = self.run_command(filename="lib/util.py", output_format="yaml")

        self.assertEqual(code, 0)
        self.assertEqual(yaml.safe_load(out)["filename"], "lib/util.py")

    def test_stdin_name_placeholder(self):
        with patch("sys.stdin", io.StringIO(SAMPLE_DIFF)):
            _, out, _ = self.run_command()
        self.assertEqual(json.loads(out)["filename"], "-")

    def test_text_format(self):
        code, out, _ = self.run_command(
            input_file=str(self.diff_path), filename="lib/util.py", output_format="text"
        )

        self.assertEqual(code, 0)
        self.assertIn("Total hunks: 1", out)
        self.assertIn("Lines: +2 -1", out)

    def test_missing_input_file(self):
        code, out, err = self.run_command(input_file="/nonexistent/change.diff")

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Input file not found", err)

    def test_malformed_diff(self):
        self.diff_path.write_text("diff --git a/x b/x\n")

        code, out, err = self.run_command(input_file=str(self.diff_path))

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("too_short", err)

    def test_bad_range(self):
        self.diff_path.write_text(SAMPLE_DIFF.replace("@@ -7 +7,2 @@", "@@ -x +7,2 @@"))

        code, _, err = self.run_command(input_file=str(self.diff_path))

        self.assertEqual(code, 1)
        self.assertIn("bad_range", err)


if __name__ == "__main__":
    unittest.main()
