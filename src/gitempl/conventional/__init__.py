"""Conventional commit parsing."""

from gitempl.conventional.parser import (
    ConventionalCommitError,
    ConventionalCommitParser,
    parse_conventional_commit,
)

__all__ = [
    "ConventionalCommitError",
    "ConventionalCommitParser",
    "parse_conventional_commit",
]
