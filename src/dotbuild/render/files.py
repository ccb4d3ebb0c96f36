"""Writing rendered output to disk and opening it."""

import logging
import tempfile
import webbrowser
from pathlib import Path

from ..errors import RenderError
from .framework import OutputFormat

logger = logging.getLogger(__name__)


def render_file(data: bytes, format: OutputFormat, directory: Path | None = None) -> Path:
    """Write rendered bytes to a new temporary file.

    Args:
        data: Rendered image bytes
        format: Format of ``data``, used for the file suffix
        directory: Directory for the file (default: system temp directory)

    Returns:
        Path of the written file

    Raises:
        RenderError: If the file cannot be written
    """
    try:
        with tempfile.NamedTemporaryFile(
            prefix="dotbuild",
            suffix=format.suffix,
            dir=directory,
            delete=False,
        ) as f:
            f.write(data)
    except OSError as e:
        raise RenderError(f"failed to write rendered {format.value}: {e}", format=format.value) from e

    path = Path(f.name)
    logger.info(f"Wrote {len(data)} bytes to {path}")
    return path


def view(path: Path) -> bool:
    """Open a rendered file with the platform's default viewer."""
    uri = Path(path).resolve().as_uri()
    logger.info(f"Opening {uri}")
    return webbrowser.open(uri)
