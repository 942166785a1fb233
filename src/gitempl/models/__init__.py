"""Data models for rendering Git history."""

from gitempl.models.commit import (
    COMMIT_FIELDS,
    Commit,
    CommitList,
    ConventionalCommit,
    Note,
    NoteList,
    RawCommit,
    oldest_first,
)
from gitempl.models.config import RepositoryConfig, Settings

__all__ = [
    "COMMIT_FIELDS",
    "Commit",
    "CommitList",
    "ConventionalCommit",
    "Note",
    "NoteList",
    "RawCommit",
    "oldest_first",
    "RepositoryConfig",
    "Settings",
]
