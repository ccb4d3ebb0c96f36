"""Renderer collaborator interface."""

from abc import ABC, abstractmethod
from enum import Enum


class OutputFormat(str, Enum):
    """Image formats a renderer can be asked for."""
    SVG = "svg"
    PNG = "png"
    JPG = "jpg"
    PDF = "pdf"
    DOT = "dot"

    @property
    def suffix(self) -> str:
        return f".{self.value}"


class Renderer(ABC):
    """Turns DOT source into rendered bytes.

    Implementations must not keep state from one call to the next, and must
    report every failure as a RenderError.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the renderer."""
        pass

    @abstractmethod
    def render(self, source: bytes, format: OutputFormat) -> bytes:
        """Render UTF-8 encoded DOT source into ``format``."""
        pass
