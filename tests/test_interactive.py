"""Tests for interactive prompt helpers."""

import io
import unittest
from unittest.mock import patch

from hunkreview.utils.interactive import PromptChoice, format_choices, prompt_choice, separator


CHOICES = [PromptChoice("c", "Commit"), PromptChoice("s", "Skip")]


class TestFormatChoices(unittest.TestCase):
    def test_plain(self):
        self.assertEqual(format_choices(CHOICES), "Commit (c)  Skip (s)")

    def test_default_marked(self):
        self.assertEqual(format_choices(CHOICES, default="s"), "Commit (c)  Skip [s]")


class TestPromptChoice(unittest.TestCase):
    def test_matches_key(self):
        with patch("builtins.input", return_value="c"):
            self.assertEqual(prompt_choice("Hunk", CHOICES), "c")

    def test_matches_label_case_insensitively(self):
        with patch("builtins.input", return_value="  SKIP "):
            self.assertEqual(prompt_choice("Hunk", CHOICES), "s")

    def test_empty_response_uses_default(self):
        with patch("builtins.input", return_value=""):
            self.assertEqual(prompt_choice("Hunk", CHOICES, default="s"), "s")

    def test_invalid_response_reprompts(self):
        with patch("builtins.input", side_effect=["x", "", "c"]) as mock_input, patch(
            "sys.stdout", new_callable=io.StringIO
        ) as out:
            result = prompt_choice("Hunk", CHOICES)

        self.assertEqual(result, "c")
        self.assertEqual(mock_input.call_count, 3)
        self.assertIn("Please enter 'c', 's'", out.getvalue())

    def test_eof_returns_none(self):
        with patch("builtins.input", side_effect=EOFError):
            self.assertIsNone(prompt_choice("Hunk", CHOICES))

    def test_prompt_text(self):
        with patch("builtins.input", return_value="c") as mock_input:
            prompt_choice("Hunk", CHOICES, default="c")
        mock_input.assert_called_once_with("Hunk  Commit [c]  Skip (s): ")


class TestSeparator(unittest.TestCase):
    def test_separator(self):
        self.assertEqual(separator("=", 5), "=====")


if __name__ == "__main__":
    unittest.main()
