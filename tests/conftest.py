"""Shared fixtures."""

import tempfile
from pathlib import Path

import git
import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def test_repo():
    """Create a temporary Git repository with three conventional commits."""
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_path = Path(tmpdir)
        repo = git.Repo.init(repo_path)

        # Configure git
        repo.config_writer().set_value("user", "name", "Test User").release()
        repo.config_writer().set_value("user", "email", "test@example.com").release()

        # Create initial commit
        (repo_path / "README.md").write_text("# Test Project\n")
        repo.index.add(["README.md"])
        repo.index.commit("chore: initial commit")

        # Create second commit
        (repo_path / "main.py").write_text("def hello():\n    print('Hello, World!')\n")
        repo.index.add(["main.py"])
        repo.index.commit("feat(cli): add main.py\n\nPrints a greeting.\n\nRefs: #1")

        # Create third commit
        (repo_path / "main.py").write_text("def hello():\n    print('Hello, gitempl!')\n")
        repo.index.add(["main.py"])
        repo.index.commit("fix: update hello message")

        yield repo_path


@pytest.fixture
def empty_repo():
    """Create a temporary Git repository without commits."""
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_path = Path(tmpdir)
        git.Repo.init(repo_path)
        yield repo_path
