"""CLI command implementations."""

from hunkreview.commands.parse_diff import cmd_parse_diff
from hunkreview.commands.review import cmd_review
from hunkreview.commands.status import cmd_status

__all__ = ["cmd_parse_diff", "cmd_review", "cmd_status"]
