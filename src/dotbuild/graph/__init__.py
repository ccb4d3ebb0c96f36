"""Graph entities: nodes, edges, graphs and drawings."""

from .builder import Drawing, Graph, drawing
from .models import Attributed, Edge, EdgeKind, Node

__all__ = [
    "Attributed",
    "Drawing",
    "Edge",
    "EdgeKind",
    "Graph",
    "Node",
    "drawing",
]
