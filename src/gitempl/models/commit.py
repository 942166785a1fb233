"""Data models for commits exposed to templates.

Commits, their conventional-commit metadata and trailer notes are built
once during extraction and never modified afterwards. ``CommitList`` and
``NoteList`` carry the filter helpers that templates call to narrow the
history before iterating it.
"""

from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SHORT_HASH_LENGTH = 7


class RawCommit(BaseModel):
    """A commit as read from the repository log, before parsing."""

    model_config = ConfigDict(frozen=True)

    hash: str = Field(..., description="Full commit SHA hash")
    author: str = Field("", description="Author name")
    message: str = Field("", description="Raw commit message")
    stats: str = Field("", description="Diff-stat text in git --stat layout")


class Note(BaseModel):
    """A single trailer from the footer of a conventional commit."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Trailer token, e.g. 'BREAKING CHANGE' or 'Refs'")
    value: str = Field("", description="Trailer value")


class NoteList(tuple):
    """Ordered, immutable sequence of notes."""

    def __getitem__(self, key):
        if isinstance(key, slice):
            return NoteList(super().__getitem__(key))
        return super().__getitem__(key)

    def keep_by_type(self, note_type: str) -> "NoteList":
        """Return the notes whose type equals ``note_type``, in order."""
        return NoteList(note for note in self if note.type == note_type)


class ConventionalCommit(BaseModel):
    """Structured view of a conventional commit message.

    Every field is empty when the message did not follow the convention.
    """

    model_config = ConfigDict(frozen=True)

    header: str = Field("", description="First line of the message")
    description: str = Field("", description="Text after 'type(scope): '")
    body: str = Field("", description="Paragraphs between header and footer")
    footer: str = Field("", description="Trailer block at the end of the message")
    type: str = Field("", description="Commit type, e.g. feat or fix")
    scope: str = Field("", description="Optional scope in parentheses")
    notes: Tuple[Note, ...] = Field(default_factory=NoteList, description="Parsed footer trailers")

    @field_validator("notes", mode="after")
    @classmethod
    def _as_note_list(cls, notes: Tuple[Note, ...]) -> NoteList:
        return NoteList(notes)

    def has_note(self, note_type: str, value: str) -> bool:
        """Check whether any note matches both type and value exactly."""
        return any(n.type == note_type and n.value == value for n in self.notes)


class Commit(BaseModel):
    """A commit as seen by templates."""

    model_config = ConfigDict(frozen=True)

    author: str = Field("", description="Author name")
    hash: str = Field(..., description="Full commit SHA hash")
    hash_short: str = Field("", description="Short commit SHA hash (7 chars), derived from hash")
    message: str = Field("", description="Raw commit message")
    stats: str = Field("", description="Pre-rendered diff-stat text")
    cc: ConventionalCommit = Field(default_factory=ConventionalCommit)

    @model_validator(mode="before")
    @classmethod
    def _derive_hash_short(cls, data: Any) -> Any:
        # hash_short always follows hash, whatever the caller passed
        if isinstance(data, dict) and isinstance(data.get("hash"), str):
            data = dict(data)
            data["hash_short"] = data["hash"][:SHORT_HASH_LENGTH]
        return data

    @classmethod
    def from_raw(
        cls,
        hash: str,
        author: str = "",
        message: str = "",
        stats: str = "",
        cc: Optional[ConventionalCommit] = None,
    ) -> "Commit":
        """Build a commit from log fields and a parsed message."""
        return cls(
            author=author,
            hash=hash,
            message=message,
            stats=stats,
            cc=cc if cc is not None else ConventionalCommit(),
        )


# Fields accepted by CommitList.keep_by_field / drop_by_field
COMMIT_FIELDS: Dict[str, Callable[[Commit], str]] = {
    "Author": lambda commit: commit.author,
    "Scope": lambda commit: commit.cc.scope,
    "Type": lambda commit: commit.cc.type,
}


class CommitList(tuple):
    """Ordered, immutable sequence of commits (oldest first).

    Every filter returns a new ``CommitList`` so calls can be chained
    inside a template::

        {% for c in commits.keep_by_field("Type", "feat").drop_by_note("Skip-Changelog", "true") %}
    """

    def __getitem__(self, key):
        if isinstance(key, slice):
            return CommitList(super().__getitem__(key))
        return super().__getitem__(key)

    def filter(self, predicate: Callable[[Commit], bool]) -> "CommitList":
        """Return the commits for which ``predicate`` is true."""
        return CommitList(commit for commit in self if predicate(commit))

    def keep_by_field(self, field: str, value: str) -> "CommitList":
        """Keep commits whose ``field`` equals ``value``.

        An unknown field name matches nothing, so the result is empty.
        """
        accessor = COMMIT_FIELDS.get(field)
        if accessor is None:
            return CommitList()
        return self.filter(lambda commit: accessor(commit) == value)

    def drop_by_field(self, field: str, value: str) -> "CommitList":
        """Drop commits whose ``field`` equals ``value``.

        An unknown field name matches nothing, so every commit is kept.
        """
        accessor = COMMIT_FIELDS.get(field)
        if accessor is None:
            return CommitList(self)
        return self.filter(lambda commit: accessor(commit) != value)

    def keep_by_note(self, note_type: str, value: str) -> "CommitList":
        """Keep commits carrying a note with this exact type and value."""
        return self.filter(lambda commit: commit.cc.has_note(note_type, value))

    def drop_by_note(self, note_type: str, value: str) -> "CommitList":
        """Drop commits carrying a note with this exact type and value."""
        return self.filter(lambda commit: not commit.cc.has_note(note_type, value))


def oldest_first(commits: Iterable[Commit]) -> CommitList:
    """Reverse a newest-first log into a CommitList."""
    return CommitList(reversed(list(commits)))
