"""Configuration models."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RepositoryConfig(BaseModel):
    """Configuration for the Git repository whose history is rendered."""

    repo_path: Path = Field(..., description="Path to the Git repository")
    branch: str = Field("HEAD", description="Branch or revision to walk")
    max_count: Optional[int] = Field(None, description="Maximum number of commits to read")

    class Config:
        """Pydantic config."""
        json_schema_extra = {
            "example": {
                "repo_path": "/path/to/repo",
                "branch": "HEAD",
                "max_count": None,
            }
        }


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are prefixed with GITEMPL_ (e.g., GITEMPL_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="GITEMPL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Repository defaults, overridden by CLI flags
    default_dir: str = "."
    default_branch: str = "HEAD"

    # Logging
    log_level: str = "WARNING"
