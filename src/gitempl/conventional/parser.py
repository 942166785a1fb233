"""Conventional commit message parsing.

A message is split into a header (``type(scope)!: description``), an
optional body and an optional footer made of ``Token: value`` trailers::

    feat(api): add pagination

    Pages are 50 items by default.

    Refs: #123
    BREAKING CHANGE: list endpoints no longer return everything
"""

import re
from typing import List

import structlog

from gitempl.models import ConventionalCommit, Note

logger = structlog.get_logger(__name__)

HEADER_RE = re.compile(
    r"^(?P<type>[A-Za-z][\w-]*)"
    r"(?:\((?P<scope>[^()\r\n]*)\))?"
    r"(?P<breaking>!)?"
    r": (?P<description>\S.*)$"
)
TRAILER_RE = re.compile(r"^(?P<token>BREAKING[ -]CHANGE|[\w-]+)(?:: | #)(?P<value>.*)$")
PARAGRAPH_SPLIT_RE = re.compile(r"\n[ \t]*\n")


class ConventionalCommitError(ValueError):
    """Raised when a message does not follow the conventional commit format."""


class ConventionalCommitParser:
    """Parses commit messages into ConventionalCommit values."""

    def parse(self, message: str) -> ConventionalCommit:
        """Parse a full commit message.

        Args:
            message: Raw commit message (header, optional body and footer)

        Returns:
            ConventionalCommit with all recognized parts

        Raises:
            ConventionalCommitError: If the header is not conventional
        """
        text = message.replace("\r\n", "\n").strip()
        header, _, rest = text.partition("\n")
        header = header.strip()

        match = HEADER_RE.match(header)
        if match is None:
            raise ConventionalCommitError(f"Not a conventional commit header: {header!r}")

        paragraphs = [p.strip() for p in PARAGRAPH_SPLIT_RE.split(rest.strip("\n")) if p.strip()]
        footer = ""
        if paragraphs and TRAILER_RE.match(paragraphs[-1].split("\n", 1)[0]):
            footer = paragraphs.pop()

        return ConventionalCommit(
            header=header,
            description=match.group("description").strip(),
            body="\n\n".join(paragraphs),
            footer=footer,
            type=match.group("type"),
            scope=match.group("scope") or "",
            notes=self.parse_notes(footer),
        )

    def parse_notes(self, footer: str) -> List[Note]:
        """Split a footer into trailer notes.

        Lines that do not start a new trailer continue the previous value.
        """
        tokens: List[str] = []
        values: List[List[str]] = []
        for line in footer.splitlines():
            match = TRAILER_RE.match(line)
            if match:
                tokens.append(match.group("token"))
                values.append([match.group("value")])
            elif values:
                values[-1].append(line)

        return [
            Note(type=token, value="\n".join(lines).strip())
            for token, lines in zip(tokens, values)
        ]


_DEFAULT_PARSER = ConventionalCommitParser()


def parse_conventional_commit(message: str) -> ConventionalCommit:
    """Parse a message, falling back to an empty ConventionalCommit.

    A message that does not follow the convention is common and not an
    error; it simply carries no structured data.
    """
    try:
        return _DEFAULT_PARSER.parse(message)
    except ConventionalCommitError as e:
        logger.debug("not_conventional", reason=str(e))
        return ConventionalCommit()
