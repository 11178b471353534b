"""Interactive prompting utilities for the review command.

Provides reusable prompt functions for line-based interactive CLI workflows.
"""

from __future__ import annotations

from dataclasses import dataclass


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class PromptChoice:
    """A choice option for interactive prompts."""

    key: str
    label: str


# ============================================================
# Prompt Functions
# ============================================================


def format_choices(choices: list[PromptChoice], default: str | None = None) -> str:
    """Build a menu hint such as ``Commit (c)  Skip (s)``.

    The default choice is shown with brackets instead of parentheses.
    """
    hints = []
    for c in choices:
        if default and c.key == default:
            hints.append(f"{c.label} [{c.key}]")
        else:
            hints.append(f"{c.label} ({c.key})")
    return "  ".join(hints)


def prompt_choice(
    message: str,
    choices: list[PromptChoice],
    default: str | None = None,
) -> str | None:
    """Prompt user to select from choices.

    Args:
        message: The prompt message to display
        choices: List of available choices
        default: Choice key returned for an empty response

    Returns:
        The selected choice key, or None on EOF
    """
    hint_str = format_choices(choices, default)

    while True:
        try:
            response = input(f"{message}  {hint_str}: ").strip().lower()
        except EOFError:
            return None

        if not response and default:
            return default

        for c in choices:
            if response in (c.key.lower(), c.label.lower()):
                return c.key

        valid_keys_str = ", ".join(f"'{c.key}'" for c in choices)
        print(f"  Please enter {valid_keys_str}")


# ============================================================
# Display Functions
# ============================================================


def separator(char: str = "─", width: int = 60) -> str:
    return char * width
