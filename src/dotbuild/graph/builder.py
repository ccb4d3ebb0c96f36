"""Graph builder: the container of nodes, edges and subgraphs."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ..document import Document, DocumentWriter
from .models import Edge, EdgeKind, Node

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Graph(Document):
    """An attributed container of uniquely named nodes, edges and subgraphs.

    Nodes are keyed by name and created on first reference; edges and
    subgraphs are kept in creation order. Nothing is ever removed.
    """
    name: str | None = None
    directed: bool = False
    strict: bool = False
    size: str | None = None
    is_subgraph: bool = False
    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    subgraphs: list["Graph"] = field(default_factory=list)

    @property
    def edge_kind(self) -> EdgeKind:
        return EdgeKind.for_graph(self.directed)

    def node(self, name: str, configure: Callable[[Node], Any] | None = None, **attributes: Any) -> Node:
        """Get the node called ``name``, creating it if absent.

        Args:
            name: Node name, unique within this graph
            configure: Optional callable applied to the node
            **attributes: Node attributes to set, e.g. ``color="red"``

        Returns:
            The one Node instance for ``name``
        """
        node = self.nodes.get(name)
        if node is None:
            node = Node(name)
            self.nodes[name] = node
            logger.debug(f"Created node {name!r}")
        node.update(**attributes)
        if configure is not None:
            configure(node)
        return node

    def link(
        self,
        source: str | Node,
        target: str | Node,
        configure: Callable[[Edge], Any] | None = None,
        **attributes: Any,
    ) -> Edge:
        """Append an edge from ``source`` to ``target``.

        Endpoints are resolved by name through :meth:`node`, so a Node taken
        from another graph stands for this graph's node of the same name and
        is never shared. Parallel edges are kept.
        """
        edge = Edge(self._resolve(source), self._resolve(target), self.edge_kind)
        self.edges.append(edge)
        edge.update(**attributes)
        if configure is not None:
            configure(edge)
        return edge

    def subgraph(
        self,
        configure: Callable[["Graph"], Any] | None = None,
        name: str | None = None,
        directed: bool | None = None,
    ) -> "Graph":
        """Append a nested graph.

        Args:
            configure: Optional callable applied to the new subgraph
            name: Subgraph name; names starting with ``cluster`` are drawn boxed
            directed: Edge kind for the subgraph (default: same as this graph).
                A value different from this graph's is kept, but the edges it
                creates use the other operator and Graphviz rejects the output.
        """
        if directed is None:
            directed = self.directed
        elif directed != self.directed:
            logger.warning(
                f"Subgraph {name!r} is {'directed' if directed else 'undirected'} inside a graph that is not; "
                "Graphviz rejects mixed edge operators"
            )
        sub = Graph(name=name, directed=directed, is_subgraph=True)
        if configure is not None:
            configure(sub)
        self.subgraphs.append(sub)
        return sub

    def _resolve(self, endpoint: str | Node) -> Node:
        if isinstance(endpoint, Node):
            return self.node(endpoint.name)
        return self.node(endpoint)

    def _header(self) -> str:
        if self.is_subgraph:
            return "subgraph "
        parts = []
        if self.strict:
            parts.append("strict ")
        if self.directed:
            parts.append("di")
        parts.append("graph ")
        return "".join(parts)

    def _build(self, out: DocumentWriter) -> None:
        out.append(self._header())
        if self.name is not None:
            out.quoted(self.name)
            out.append(" ")
        out.line("{")
        if self.size is not None:
            out.statement("size", self.size)
        for node in self.nodes.values():
            node.build(out)
        for edge in self.edges:
            edge.build(out)
        for sub in self.subgraphs:
            sub.build(out)
        out.line("}")


class Drawing(Document):
    """A sequence of root graphs rendered into one document."""

    def __init__(self):
        self.graphs: list[Graph] = []

    def graph(self, configure: Callable[[Graph], Any] | None = None, directed: bool = True, **attributes: Any) -> Graph:
        """Append a root graph, directed unless told otherwise.

        Args:
            configure: Optional callable applied to the new graph
            directed: Whether edges are drawn with ``->``
            **attributes: Graph fields to set: ``name``, ``strict``, ``size``
        """
        unknown = set(attributes) - {"name", "strict", "size"}
        if unknown:
            raise TypeError(f"Graph has no attribute '{sorted(unknown)[0]}'")

        graph = Graph(directed=directed, **attributes)
        if configure is not None:
            configure(graph)
        self.graphs.append(graph)
        logger.debug(f"Added graph {graph.name!r} ({len(self.graphs)} in drawing)")
        return graph

    def _build(self, out: DocumentWriter) -> None:
        for graph in self.graphs:
            graph.build(out)


def drawing(configure: Callable[[Drawing], Any] | None = None) -> Drawing:
    """Create a Drawing and apply ``configure`` to it."""
    result = Drawing()
    if configure is not None:
        configure(result)
    return result
