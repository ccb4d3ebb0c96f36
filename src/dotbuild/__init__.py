"""dotbuild - Build Graphviz DOT documents in Python.

dotbuild assembles nodes, edges and subgraphs into deterministic DOT text and
optionally hands it to Graphviz to produce SVG, PNG or JPEG images.
"""

__version__ = "0.1.0"
__description__ = "Build Graphviz DOT documents and render them"

from dotbuild.document import Document, DocumentWriter
from dotbuild.errors import DescriptionError, DotbuildError, ExecutableNotFound, RenderError
from dotbuild.graph import Drawing, Edge, EdgeKind, Graph, Node, drawing
from dotbuild.lang import quote, unquote
from dotbuild.render import GraphvizRenderer, OutputFormat, Renderer

__all__ = [
    "__version__",
    "__description__",
    "Document",
    "DocumentWriter",
    "Drawing",
    "Edge",
    "EdgeKind",
    "Graph",
    "Node",
    "drawing",
    "quote",
    "unquote",
    "OutputFormat",
    "Renderer",
    "GraphvizRenderer",
    "DotbuildError",
    "RenderError",
    "ExecutableNotFound",
    "DescriptionError",
]
