#!/usr/bin/env python3
"""CLI entry point for hunkreview.

Usage:
    python -m hunkreview <command> [options]

Commands:
    review      Interactively commit/skip uncommitted hunks file by file
    status      List staged and unstaged files with their hunk counts
    parse-diff  Parse one file's zero-context git diff into structured hunks
"""

import argparse
import sys
from pathlib import Path

from hunkreview.commands.parse_diff import cmd_parse_diff
from hunkreview.commands.review import cmd_review
from hunkreview.commands.status import cmd_status
from hunkreview.domain.config import DEFAULT_SCREEN_WIDTH, DisplayConfig, ReviewConfig
from hunkreview.domain.diff_scope import DiffScope


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hunkreview",
        description="Review uncommitted git changes hunk by hunk",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  review      Interactively commit/skip uncommitted hunks file by file
  status      List staged and unstaged files with their hunk counts
  parse-diff  Parse one file's zero-context git diff into structured hunks

Examples (run from repo root):
  hunkreview review 120
  hunkreview review --width 100 --refresh 5
  hunkreview status --format json
  git diff --unified=0 src/app.py | hunkreview parse-diff --filename src/app.py
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # review command
    parser_review = subparsers.add_parser(
        "review",
        help="Interactively review uncommitted hunks",
    )
    parser_review.add_argument(
        "screen_width",
        nargs="?",
        type=int,
        help=f"Terminal width in columns (default: {DEFAULT_SCREEN_WIDTH})",
    )
    parser_review.add_argument(
        "--width",
        type=int,
        help="Terminal width in columns (overrides the positional value)",
    )
    parser_review.add_argument(
        "--refresh",
        type=float,
        metavar="SECONDS",
        help="Re-read git status in the background every SECONDS",
    )
    _add_repo_arguments(parser_review)

    # status command
    parser_status = subparsers.add_parser(
        "status",
        help="List staged and unstaged files",
    )
    scope_group = parser_status.add_mutually_exclusive_group()
    scope_group.add_argument(
        "--staged-only",
        action="store_true",
        help="Only list staged files",
    )
    scope_group.add_argument(
        "--unstaged-only",
        action="store_true",
        help="Only list unstaged files",
    )
    parser_status.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )
    _add_repo_arguments(parser_status)

    # parse-diff command
    parser_parse_diff = subparsers.add_parser(
        "parse-diff",
        help="Parse a single-file git diff and output structured hunks",
    )
    parser_parse_diff.add_argument(
        "--input-file",
        help="Path to diff file. If not provided, reads from stdin",
    )
    parser_parse_diff.add_argument(
        "--filename",
        help="Name of the diffed file to record in the output",
    )
    parser_parse_diff.add_argument(
        "--format",
        choices=["json", "yaml", "text"],
        default="json",
        help="Output format (default: json)",
    )

    return parser


def _add_repo_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--repo-path",
        default=".",
        help="Path to the git repository root (default: current directory)",
    )
    subparser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if unstaged changes cannot be loaded (default: show none)",
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Route to command implementations with explicit parameters
    if args.command == "review":
        width = args.width if args.width is not None else args.screen_width
        if width is None:
            width = DEFAULT_SCREEN_WIDTH
        try:
            config = ReviewConfig(
                repo_path=Path(args.repo_path),
                display=DisplayConfig(width=width),
                refresh_interval=args.refresh,
                strict=args.strict,
            )
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return cmd_review(config)

    elif args.command == "status":
        scope = None
        if args.staged_only:
            scope = DiffScope.STAGED
        elif args.unstaged_only:
            scope = DiffScope.UNSTAGED
        config = ReviewConfig(repo_path=Path(args.repo_path), strict=args.strict)
        return cmd_status(config, scope=scope, output_format=args.format)

    elif args.command == "parse-diff":
        return cmd_parse_diff(
            input_file=args.input_file,
            filename=args.filename,
            output_format=args.format,
        )

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
