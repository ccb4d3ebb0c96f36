"""Node and edge entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from ..document import Document, DocumentWriter


class EdgeKind(str, Enum):
    """Edge kinds; the value is the DOT connector token."""
    DIRECTED = "->"
    UNDIRECTED = "--"

    @classmethod
    def for_graph(cls, directed: bool) -> "EdgeKind":
        return cls.DIRECTED if directed else cls.UNDIRECTED

    @property
    def connector(self) -> str:
        return self.value


class Attributed(Document):
    """Base for entities carrying a fixed, ordered set of optional attributes."""

    ATTRIBUTES: ClassVar[tuple[str, ...]] = ()

    def attributes(self) -> list[tuple[str, Any]]:
        """Attribute (key, value) pairs in declared order, unset ones included."""
        return [(name, getattr(self, name)) for name in self.ATTRIBUTES]

    def update(self, **attributes: Any) -> None:
        """Set several attributes at once.

        Raises:
            TypeError: For a keyword that is not an attribute of this entity
        """
        for key, value in attributes.items():
            if key not in self.ATTRIBUTES:
                raise TypeError(f"{type(self).__name__} has no attribute '{key}'")
            setattr(self, key, value)


@dataclass(eq=False)
class Node(Attributed):
    """A named vertex. Obtain nodes through :meth:`Graph.node`."""

    ATTRIBUTES: ClassVar[tuple[str, ...]] = (
        "width", "height", "label", "color", "style", "shape", "sides", "peripheries", "skew",
    )

    name: str
    width: float | None = None
    height: float | None = None
    label: str | None = None
    color: str | None = None
    style: str | None = None
    shape: str | None = None
    sides: int | None = None
    peripheries: int | None = None
    skew: float | None = None

    def _build(self, out: DocumentWriter) -> None:
        out.quoted(self.name)
        out.attribute_block(self.attributes())


@dataclass(eq=False)
class Edge(Attributed):
    """A connection from ``tail`` to ``head``. Obtain edges through :meth:`Graph.link`."""

    ATTRIBUTES: ClassVar[tuple[str, ...]] = ("width", "height", "label", "color", "style")

    tail: Node
    head: Node
    kind: EdgeKind = EdgeKind.DIRECTED
    width: float | None = None
    height: float | None = None
    label: str | None = None
    color: str | None = None
    style: str | None = None

    @property
    def directed(self) -> bool:
        return self.kind is EdgeKind.DIRECTED

    def _build(self, out: DocumentWriter) -> None:
        out.quoted(self.tail.name)
        out.append(self.kind.connector)
        out.quoted(self.head.name)
        out.attribute_block(self.attributes())
