"""Command-line interface for gitempl."""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from gitempl.extraction import GitExtractor
from gitempl.models import RepositoryConfig, Settings
from gitempl.output import write_output
from gitempl.rendering import TemplateInput, TemplateRenderer, load_template_text

app = typer.Typer(
    name="gitempl",
    help="A simple doc generator that is conventional commit aware",
    add_completion=False,
)
# stdout carries the rendered document, so diagnostics go to stderr
console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Send structlog output to stderr, filtered at ``level``."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@app.command()
def render(
    output: Optional[Path] = typer.Argument(None, help="Output file; defaults to stdout"),
    repo_dir: Optional[Path] = typer.Option(None, "--dir", "-d", help="Directory of the Git repository"),
    template: Optional[Path] = typer.Option(None, "--template", "-t", help="Template file; defaults to stdin"),
    branch: Optional[str] = typer.Option(None, "--branch", "-b", help="Branch or revision to render"),
    max_commits: Optional[int] = typer.Option(None, "--max-commits", "-n", help="Maximum commits to read"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging on stderr"),
) -> None:
    """Render the commit history of a Git repository through a Jinja2 template.

    \b
    Examples:
      # inline template from stdin, rendered to stdout
      gitempl <<EOF
      {% for c in commits %}
      {{ c.hash_short }} {{ c.author }}: {{ c.cc.description or c.message }}
      {% endfor %}
      EOF

    \b
      # template file, written to CHANGELOG.md
      gitempl -t changelog.md.j2 CHANGELOG.md

    \b
      # repository in another directory
      gitempl -d ../other-repo -t changelog.md.j2
    """
    settings = Settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        config = RepositoryConfig(
            repo_path=repo_dir if repo_dir is not None else Path(settings.default_dir),
            branch=branch or settings.default_branch,
            max_count=max_commits,
        )
        commits = GitExtractor(config).load_commits()

        source = load_template_text(template)
        text = TemplateRenderer().render(source, TemplateInput(commits=commits))

        write_output(text, output)

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
