"""gitempl - render Git history through Jinja2 templates."""

__version__ = "0.1.0"
