"""Unit tests for configuration models."""

from pathlib import Path

from gitempl.models import RepositoryConfig, Settings


def test_repository_config_defaults():
    config = RepositoryConfig(repo_path=Path("."))

    assert config.branch == "HEAD"
    assert config.max_count is None


def test_settings_defaults(monkeypatch):
    """Test settings when no environment variables are set."""
    for name in ("GITEMPL_LOG_LEVEL", "GITEMPL_DEFAULT_DIR", "GITEMPL_DEFAULT_BRANCH"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "WARNING"
    assert settings.default_dir == "."
    assert settings.default_branch == "HEAD"


def test_settings_from_environment(monkeypatch):
    """Test that GITEMPL_ prefixed variables override defaults."""
    monkeypatch.setenv("GITEMPL_LOG_LEVEL", "debug")
    monkeypatch.setenv("GITEMPL_DEFAULT_BRANCH", "main")

    settings = Settings(_env_file=None)

    assert settings.log_level == "debug"
    assert settings.default_branch == "main"
