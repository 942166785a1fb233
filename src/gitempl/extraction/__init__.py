"""Git history extraction."""

from gitempl.extraction.git_extractor import GitExtractor, render_stat_text

__all__ = ["GitExtractor", "render_stat_text"]
