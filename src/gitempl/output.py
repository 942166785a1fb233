"""Output selection: stdout or an atomically replaced file."""

import os
import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO


def write_output(text: str, path: Optional[Path] = None, stdout: Optional[TextIO] = None) -> None:
    """Write rendered text to ``path``, or to stdout when no path is given.

    Files are written to a temporary file in the target directory and
    renamed into place, so readers never see a partially written file.
    """
    if path is None:
        stream = stdout if stdout is not None else sys.stdout
        stream.write(text)
        stream.flush()
        return

    path = Path(path)
    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)

        # Atomic rename
        os.replace(temp_path, path)
    except Exception:
        # Clean up temp file on error
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise
