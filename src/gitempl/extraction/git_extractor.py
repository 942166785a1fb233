"""Git repository log extraction."""

import math
from typing import Iterable, Iterator, List, Tuple

import git
import structlog
from git import Commit as GitCommit
from git import Repo

from gitempl.conventional import parse_conventional_commit
from gitempl.models import Commit, CommitList, RawCommit, RepositoryConfig, oldest_first

logger = structlog.get_logger(__name__)

# Soft width of a rendered stat line, excluding the change number
STAT_LINE_LENGTH = 72


def render_stat_text(file_stats: Iterable[Tuple[str, int, int]]) -> str:
    """Render per-file insertions/deletions in git's ``--stat`` layout.

    Args:
        file_stats: (path, insertions, deletions) tuples in display order

    Returns:
        One ``" path | total +++---"`` line per file, or an empty string
    """
    file_stats = list(file_stats)
    if not file_stats:
        return ""

    name_width = max(len(path) for path, _, _ in file_stats)
    count_width = max(len(str(added + deleted)) for _, added, deleted in file_stats)
    longest_change = max(added + deleted for _, added, deleted in file_stats)

    # <pad><path><pad>|<pad><count><pad><+++---><newline>
    histogram_width = max(STAT_LINE_LENGTH - (name_width + 6), 1)
    scale = longest_change / histogram_width if longest_change > histogram_width else 1.0

    lines = []
    for path, added, deleted in file_stats:
        markers = "+" * math.floor(added / scale) + "-" * math.floor(deleted / scale)
        lines.append(f" {path:<{name_width}} | {added + deleted:>{count_width}} {markers}")
    return "\n".join(lines) + "\n"


class GitExtractor:
    """Reads commit history from a Git repository."""

    def __init__(self, config: RepositoryConfig) -> None:
        """Initialize the GitExtractor.

        Args:
            config: Repository configuration

        Raises:
            ValueError: If repository path is invalid
        """
        self.config = config
        if not config.repo_path.exists():
            raise ValueError(f"Repository path does not exist: {config.repo_path}")

        try:
            self.repo = Repo(config.repo_path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise ValueError(f"Invalid Git repository: {config.repo_path}") from e

    def iter_raw_commits(self) -> Iterator[RawCommit]:
        """Walk the configured branch, newest commit first.

        Yields:
            RawCommit objects

        Raises:
            ValueError: If the branch or revision cannot be resolved
        """
        if self.config.branch == "HEAD" and not self.repo.head.is_valid():
            logger.info("repository_has_no_commits", repo_path=str(self.config.repo_path))
            return

        kwargs = {}
        if self.config.max_count:
            kwargs["max_count"] = self.config.max_count

        try:
            for commit in self.repo.iter_commits(self.config.branch, **kwargs):
                yield self._extract_raw_commit(commit)
        except git.exc.GitCommandError as e:
            raise ValueError(f"Unknown revision: {self.config.branch}") from e

    def load_commits(self) -> CommitList:
        """Read and parse the whole history, oldest commit first.

        Returns:
            CommitList ready to be handed to a template
        """
        commits: List[Commit] = []
        for raw in self.iter_raw_commits():
            commits.append(
                Commit.from_raw(
                    hash=raw.hash,
                    author=raw.author,
                    message=raw.message,
                    stats=raw.stats,
                    cc=parse_conventional_commit(raw.message),
                )
            )

        logger.info("commits_loaded", count=len(commits), branch=self.config.branch)
        return oldest_first(commits)

    def _extract_raw_commit(self, commit: GitCommit) -> RawCommit:
        """Extract the fields templates need from a GitPython Commit.

        Args:
            commit: GitPython Commit object

        Returns:
            RawCommit object
        """
        file_stats = [
            (path, counts.get("insertions", 0), counts.get("deletions", 0))
            for path, counts in commit.stats.files.items()
        ]

        return RawCommit(
            hash=commit.hexsha,
            author=commit.author.name or "",
            message=commit.message,
            stats=render_stat_text(file_stats),
        )
