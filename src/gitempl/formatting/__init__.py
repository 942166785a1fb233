"""Formatting helpers used from templates."""

from gitempl.formatting.helpers import add, markdown_header_link, title
from gitempl.formatting.stats import StatRow, parse_stat_rows, stats_html, tokenize_stats

__all__ = [
    "add",
    "markdown_header_link",
    "title",
    "StatRow",
    "parse_stat_rows",
    "stats_html",
    "tokenize_stats",
]
