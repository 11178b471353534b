"""Tests for the status command."""

import io
import json
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from hunkreview.commands.status import cmd_status
from hunkreview.domain.config import ReviewConfig
from hunkreview.domain.diff import Chunk, FileDiff, Snippet
from hunkreview.domain.diff_scope import DiffScope
from hunkreview.domain.status import Status
from hunkreview.services.change_fetcher import FetchError


def make_file(filename: str) -> FileDiff:
    chunk = Chunk(old=Snippet(1, 1, ("-a",)), new=Snippet(1, 1, ("+b",)))
    return FileDiff(filename=filename, chunks=(chunk,))


class TestCmdStatus(unittest.TestCase):
    """Tests for cmd_status with a mocked ChangeFetcher."""

    def setUp(self):
        self.mock_fetcher = MagicMock()
        self.fetcher_patcher = patch(
            "hunkreview.commands.status.ChangeFetcher",
            return_value=self.mock_fetcher,
        )
        self.mock_fetcher_cls = self.fetcher_patcher.start()
        self.config = ReviewConfig(repo_path=Path("/tmp/repo"))

    def tearDown(self):
        self.fetcher_patcher.stop()

    def run_command(self, **kwargs) -> tuple[int, str, str]:
        with patch("sys.stdout", new_callable=io.StringIO) as out, patch(
            "sys.stderr", new_callable=io.StringIO
        ) as err:
            code = cmd_status(self.config, **kwargs)
        return code, out.getvalue(), err.getvalue()

    def test_text_output(self):
        self.mock_fetcher.fetch_status.return_value = Status(
            staged=[make_file("s.py")], unstaged=[FileDiff(filename="gone.txt")]
        )

        code, out, _ = self.run_command()

        self.assertEqual(code, 0)
        self.assertIn("modified: s.py (1 hunk)", out)
        self.assertIn("deleted: gone.txt", out)

    def test_runner_uses_repo_path(self):
        self.mock_fetcher.fetch_status.return_value = Status()

        self.run_command()

        runner = self.mock_fetcher_cls.call_args[0][0]
        self.assertEqual(runner.repo_path, Path("/tmp/repo"))

    def test_json_output(self):
        self.mock_fetcher.fetch_status.return_value = Status(unstaged=[make_file("u.py")])

        _, out, _ = self.run_command(output_format="json")

        self.assertEqual(json.loads(out)["unstaged"][0]["filename"], "u.py")

    def test_strict_passed_to_fetcher(self):
        self.config = ReviewConfig(strict=True)
        self.mock_fetcher.fetch_status.return_value = Status()

        self.run_command()

        self.assertTrue(self.mock_fetcher.fetch_status.call_args.kwargs["strict"])

    def test_warnings_go_to_stderr(self):
        def fetch_status(strict, on_warning):
            on_warning("failed to load unstaged diffs: boom")
            return Status()

        self.mock_fetcher.fetch_status.side_effect = fetch_status

        code, _, err = self.run_command()

        self.assertEqual(code, 0)
        self.assertIn("Warning: failed to load unstaged diffs: boom", err)

    def test_single_scope(self):
        self.mock_fetcher.fetch_changes.return_value = [make_file("s.py")]

        code, out, _ = self.run_command(scope=DiffScope.STAGED, output_format="json")

        self.assertEqual(code, 0)
        self.mock_fetcher.fetch_changes.assert_called_once_with(staged=True)
        self.mock_fetcher.fetch_status.assert_not_called()
        data = json.loads(out)
        self.assertEqual([d["filename"] for d in data["staged"]], ["s.py"])
        self.assertEqual(data["unstaged"], [])

    def test_fetch_error(self):
        self.mock_fetcher.fetch_status.side_effect = FetchError("failed to load staged diffs: boom")

        code, out, err = self.run_command()

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error: failed to load staged diffs: boom", err)


if __name__ == "__main__":
    unittest.main()
