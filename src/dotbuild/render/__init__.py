"""Rendering DOT source into images through external tools."""

from .files import render_file, view
from .framework import OutputFormat, Renderer
from .graphviz import GraphvizRenderer

__all__ = [
    "OutputFormat",
    "Renderer",
    "GraphvizRenderer",
    "render_file",
    "view",
]
