"""Template loading and rendering."""

from gitempl.rendering.renderer import (
    TemplateFunctions,
    TemplateInput,
    TemplateRenderer,
    load_template_text,
)

__all__ = [
    "TemplateFunctions",
    "TemplateInput",
    "TemplateRenderer",
    "load_template_text",
]
