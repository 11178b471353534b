"""hunkreview - review uncommitted git changes hunk by hunk.

A layered CLI package following:
- CLI Architecture: Single entry point dispatcher with explicit parameters
- Domain Modeling: Parse-once pattern with immutable diff models
- Services Pattern: Core services with dependency injection

Usage:
    python -m hunkreview <command> [options]
    hunkreview <command> [options]

Structure:
    hunkreview/
    ├── __main__.py          # Entry point dispatcher
    ├── domain/              # Domain models (parse-once pattern)
    │   ├── diff.py          # Snippet, Chunk, FileDiff, ParseError
    │   ├── selection.py     # SelectionState, Decision
    │   ├── status.py        # Status (staged/unstaged aggregator)
    │   ├── diff_scope.py    # DiffScope
    │   └── config.py        # ReviewConfig, DisplayConfig
    ├── services/            # Business logic services
    │   ├── change_fetcher.py
    │   ├── review_session.py
    │   └── status_refresher.py
    ├── infrastructure/      # External system interactions
    │   └── git/             # runner.py, diff_io.py
    ├── utils/
    │   └── interactive.py   # Prompt helpers
    └── commands/            # Thin command orchestrators
        ├── parse_diff.py
        ├── review.py
        └── status.py
"""

__version__ = "0.1.0"
