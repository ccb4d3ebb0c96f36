"""Document protocol shared by every buildable entity."""

import io
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any, TextIO

from .lang import format_attributes, format_value, quote
from .render import GraphvizRenderer, OutputFormat, Renderer, render_file

logger = logging.getLogger(__name__)


class DocumentWriter:
    """Accumulates DOT text for a build pass."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else io.StringIO()

    def append(self, *parts: str) -> None:
        for part in parts:
            self.stream.write(part)

    def line(self, *parts: str) -> None:
        self.append(*parts, "\n")

    def quoted(self, text: str) -> None:
        self.append(quote(text))

    def statement(self, key: str, value: Any) -> None:
        """Append a ``key=value;`` line."""
        self.line(key, "=", format_value(value), ";")

    def attribute_block(self, pairs: Iterable[tuple[str, Any]]) -> None:
        """Append `` [key=value;...];`` and end the line."""
        self.line(" [", format_attributes(pairs), "];")

    def getvalue(self) -> str:
        return self.stream.getvalue()


class Document(ABC):
    """Anything that can write itself as DOT text."""

    def build(self, out: DocumentWriter | TextIO) -> None:
        """Append this document's text to ``out``.

        Args:
            out: A DocumentWriter, or any text stream with ``write``
        """
        writer = out if isinstance(out, DocumentWriter) else DocumentWriter(out)
        self._build(writer)

    @abstractmethod
    def _build(self, out: DocumentWriter) -> None:
        pass

    @property
    def source(self) -> str:
        """The complete DOT text of this document."""
        writer = DocumentWriter()
        self._build(writer)
        return writer.getvalue()

    def __str__(self) -> str:
        return self.source

    def render(self, format: OutputFormat | str = OutputFormat.SVG, renderer: Renderer | None = None) -> bytes:
        """Render this document to image bytes.

        Args:
            format: Output format understood by the renderer
            renderer: Renderer to use (default: GraphvizRenderer with ``dot``)

        Raises:
            RenderError: If the renderer fails; the document is left untouched
        """
        format = OutputFormat(format)
        renderer = renderer or GraphvizRenderer()
        return renderer.render(self.source.encode("utf-8"), format)

    def render_file(
        self,
        format: OutputFormat | str = OutputFormat.SVG,
        directory: Path | None = None,
        renderer: Renderer | None = None,
    ) -> Path:
        """Render this document into a new temporary file and return its path."""
        format = OutputFormat(format)
        data = self.render(format, renderer)
        return render_file(data, format, directory)
