"""Template rendering with Jinja2."""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, TextIO

import structlog
from jinja2 import Environment, Template

from gitempl.formatting import add, markdown_header_link, stats_html, title
from gitempl.models import CommitList

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TemplateFunctions:
    """Helpers exposed to templates, both as filters and as globals.

    ``{{ commit.stats | stats_html }}`` and ``{{ stats_html(commit.stats) }}``
    are equivalent. Note that ``title`` replaces Jinja2's built-in filter
    of the same name: only the first character is upper-cased.
    """

    functions: Mapping[str, Callable[..., Any]] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "TemplateFunctions":
        """Build the standard helper set."""
        return (
            cls()
            .with_function("add", add)
            .with_function("markdown_header_link", markdown_header_link)
            .with_function("stats_html", stats_html)
            .with_function("title", title)
        )

    def with_function(self, name: str, function: Callable[..., Any]) -> "TemplateFunctions":
        """Return a copy of the registry with one more helper."""
        functions = dict(self.functions)
        functions[name] = function
        return TemplateFunctions(functions)


@dataclass(frozen=True)
class TemplateInput:
    """Root value handed to templates."""

    commits: CommitList = field(default_factory=CommitList)

    def context(self) -> Dict[str, Any]:
        """Top-level template variables."""
        return {"commits": self.commits}


class TemplateRenderer:
    """Compiles and renders user templates."""

    def __init__(self, functions: Optional[TemplateFunctions] = None) -> None:
        """Initialize the renderer.

        Args:
            functions: Helper registry; defaults to TemplateFunctions.default()
        """
        self.functions = functions if functions is not None else TemplateFunctions.default()
        # Output is markdown, not HTML, so no autoescaping
        self.env = Environment(autoescape=False, keep_trailing_newline=True)
        self.env.filters.update(self.functions.functions)
        self.env.globals.update(self.functions.functions)

    def compile(self, source: str) -> Template:
        """Compile template source.

        Raises:
            jinja2.TemplateSyntaxError: If the source is not a valid template
        """
        return self.env.from_string(source)

    def render(self, source: str, template_input: TemplateInput) -> str:
        """Compile ``source`` and render it against ``template_input``."""
        template = self.compile(source)
        output = template.render(template_input.context())
        logger.debug("template_rendered", commits=len(template_input.commits), size=len(output))
        return output


def load_template_text(path: Optional[Path] = None, stdin: Optional[TextIO] = None) -> str:
    """Read template source from a file, or from stdin when no path is given."""
    if path is not None:
        return Path(path).read_text(encoding="utf-8")
    stream = stdin if stdin is not None else sys.stdin
    return stream.read()
