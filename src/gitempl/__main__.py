"""Allow running gitempl with ``python -m gitempl``."""

from gitempl.cli import app

if __name__ == "__main__":
    app()
