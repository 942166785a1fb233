"""Diff-stat table formatting.

Turns the ``--stat`` block rendered for a commit::

     src/app.py  | 12 ++++++++----
     README.md   |  3 +++

into a markdown table with File / Count / Diff columns. The text is read in
a single pass: a lexer emits FILE and COUNT tokens and a two-state machine
groups them into rows, flushing the current row whenever a new path shows up.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

FILE_CHARS = frozenset(string.ascii_letters + string.digits + "_.-/")
SPACE_CHARS = frozenset(" \t\n\f\r")
DIGIT_CHARS = frozenset(string.digits)

TABLE_HEADER = "| File | Count | Diff |\n| ------ | ------ | ------ |\n"
ADDITIONS_SPAN = '<span style="color:green">{}</span>'
REMOVALS_SPAN = '<span style="color:red">{}</span>'


class TokenKind(Enum):
    """Kinds of tokens found in a stat block."""

    FILE = "file"
    COUNT = "count"


@dataclass(frozen=True)
class StatToken:
    """A lexical token: a path, or a change count with its +/- markers."""

    kind: TokenKind
    text: str
    additions: str = ""
    removals: str = ""


@dataclass
class StatRow:
    """One file entry of a stat block."""

    path: str
    count: Optional[str] = None
    additions: str = ""
    removals: str = ""

    def to_markdown(self) -> str:
        """Render the row as a markdown table line (without newline)."""
        line = f"| [{self.path}]({self.path}) "
        if self.count is not None:
            line += f"| **{self.count}** | "
        if self.additions:
            line += ADDITIONS_SPAN.format(self.additions)
        if self.removals:
            line += REMOVALS_SPAN.format(self.removals)
        if not line.endswith("|"):
            line += " |"
        return line


class _State(Enum):
    EXPECT_FILE = "expect_file"
    ACCUMULATING_ROW = "accumulating_row"


def _skip(text: str, pos: int, chars) -> int:
    """Return the index of the first character at or after ``pos`` not in ``chars``."""
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def tokenize_stats(text: str) -> Iterator[StatToken]:
    """Yield FILE and COUNT tokens from a stat block.

    A run of path characters is always a FILE token, digits included, so a
    count is only recognized when it is reached through leading whitespace
    (as in ``"path | 12 ++--"``). Unrecognized characters are skipped.
    """
    pos = 0
    while pos < len(text):
        char = text[pos]

        if char in FILE_CHARS:
            end = _skip(text, pos, FILE_CHARS)
            yield StatToken(TokenKind.FILE, text[pos:end])
            pos = _skip(text, end, SPACE_CHARS)
            continue

        if char in SPACE_CHARS:
            digits_start = _skip(text, pos, SPACE_CHARS)
            digits_end = _skip(text, digits_start, DIGIT_CHARS)
            if digits_end > digits_start:
                markers_start = _skip(text, digits_end, SPACE_CHARS)
                additions_end = _skip(text, markers_start, "+")
                removals_end = _skip(text, additions_end, "-")
                yield StatToken(
                    TokenKind.COUNT,
                    text[digits_start:digits_end],
                    additions=text[markers_start:additions_end],
                    removals=text[additions_end:removals_end],
                )
                pos = removals_end
                continue

        pos += 1


def parse_stat_rows(text: str) -> List[StatRow]:
    """Group the tokens of a stat block into rows, keeping input order."""
    rows: List[StatRow] = []
    state = _State.EXPECT_FILE
    row: Optional[StatRow] = None

    for token in tokenize_stats(text):
        if token.kind is TokenKind.FILE:
            if row is not None:
                rows.append(row)
            row = StatRow(path=token.text)
            state = _State.ACCUMULATING_ROW
        elif state is _State.ACCUMULATING_ROW:
            row.count = token.text
            row.additions = token.additions
            row.removals = token.removals
            state = _State.EXPECT_FILE
        # a count with no open row has nothing to attach to

    if row is not None:
        rows.append(row)
    return rows


def stats_html(text: str) -> str:
    """Format a stat block as a markdown table.

    Returns an empty string when nothing in ``text`` looks like a file
    entry; the header is only written once there is a row to follow it.
    """
    rows = parse_stat_rows(text)
    if not rows:
        return ""
    return TABLE_HEADER + "".join(row.to_markdown() + "\n" for row in rows)
