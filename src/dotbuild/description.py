"""JSON graph descriptions and their translation into the builder API."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import DescriptionError
from .graph import Graph

logger = logging.getLogger(__name__)


class NodeDescription(BaseModel):
    """A node and its display attributes."""

    name: str = Field(description="Node name, unique within its graph")
    width: float | None = None
    height: float | None = None
    label: str | None = None
    color: str | None = None
    style: str | None = None
    shape: str | None = None
    sides: int | None = None
    peripheries: int | None = None
    skew: float | None = None

    model_config = ConfigDict(extra="forbid")

    def attributes(self) -> dict:
        return self.model_dump(exclude={"name"}, exclude_none=True)


class EdgeDescription(BaseModel):
    """An edge between two named nodes."""

    tail: str = Field(alias="from", description="Name of the tail node")
    head: str = Field(alias="to", description="Name of the head node")
    width: float | None = None
    height: float | None = None
    label: str | None = None
    color: str | None = None
    style: str | None = None

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def attributes(self) -> dict:
        return self.model_dump(exclude={"tail", "head"}, exclude_none=True)


class GraphDescription(BaseModel):
    """A graph with its nodes, edges and nested subgraphs.

    ``directed`` defaults to true for a root graph; a subgraph without it
    takes its parent's value.
    """

    name: str | None = None
    directed: bool | None = None
    strict: bool = False
    size: str | None = None
    nodes: list[NodeDescription] = Field(default_factory=list)
    edges: list[EdgeDescription] = Field(default_factory=list)
    subgraphs: list["GraphDescription"] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_graph(self) -> Graph:
        """Build a root Graph from this description."""
        graph = Graph(
            name=self.name,
            directed=True if self.directed is None else self.directed,
            strict=self.strict,
            size=self.size,
        )
        self._populate(graph)
        logger.debug(
            f"Built graph {graph.name!r} with {len(graph.nodes)} nodes, "
            f"{len(graph.edges)} edges and {len(graph.subgraphs)} subgraphs"
        )
        return graph

    def _populate(self, graph: Graph) -> None:
        for node in self.nodes:
            graph.node(node.name, **node.attributes())
        for edge in self.edges:
            graph.link(edge.tail, edge.head, **edge.attributes())
        for sub in self.subgraphs:
            child = graph.subgraph(name=sub.name, directed=sub.directed)
            child.size = sub.size
            sub._populate(child)


def load_description(path: str | Path) -> GraphDescription:
    """Load and validate a graph description file.

    Raises:
        DescriptionError: If the file cannot be read or is not a valid description
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DescriptionError(f"Cannot read graph description {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DescriptionError(f"Invalid JSON in graph description {path}: {e}") from e

    try:
        return GraphDescription.model_validate(data)
    except ValidationError as e:
        raise DescriptionError(f"Invalid graph description {path}: {e}") from e
