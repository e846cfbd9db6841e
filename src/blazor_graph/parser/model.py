"""Data model for component usage graphs."""

from __future__ import annotations

__all__ = [
    "AdjacencyRelation",
    "ComponentGraph",
    "ComponentNode",
    "PositionedNode",
]

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field

import networkx as nx

AdjacencyRelation = dict[str, list[str]]
"""Component name -> ordered list of directly used component names."""


@dataclass(frozen=True)
class PositionedNode:
    """A component with its final page coordinates.

    This is what renderers consume. ``x``/``y`` use a y-up convention:
    larger ``y`` is higher on the page.
    """

    name: str
    x: float
    y: float
    row: int
    column: int
    child_names: tuple[str, ...] = field(default_factory=tuple)
    parent_names: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "row": self.row,
            "column": self.column,
            "children": list(self.child_names),
            "parents": list(self.parent_names),
        }


class ComponentNode:
    """A view over one entry of a :class:`ComponentGraph`.

    Nodes never hold references to other nodes; children and parents are
    looked up by name in the owning graph.
    """

    __slots__ = ("_graph", "name")

    def __init__(self, graph: ComponentGraph, name: str) -> None:
        self._graph = graph
        self.name = name

    def __repr__(self) -> str:
        return f"ComponentNode({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentNode):
            return NotImplemented
        return self._graph is other._graph and self.name == other.name

    def __hash__(self) -> int:
        return hash((id(self._graph), self.name))

    @property
    def children(self) -> list[str]:
        return self._graph.children(self.name)

    @property
    def parents(self) -> list[str]:
        return self._graph.parents(self.name)

    @property
    def cell(self) -> tuple[int, int] | None:
        return self._graph.data(self.name).get("cell")

    @cell.setter
    def cell(self, value: tuple[int, int] | None) -> None:
        self._graph.data(self.name)["cell"] = value

    @property
    def position(self) -> tuple[float, float] | None:
        return self._graph.data(self.name).get("position")

    @position.setter
    def position(self, value: tuple[float, float] | None) -> None:
        self._graph.data(self.name)["position"] = value


class ComponentGraph:
    """Directed component graph stored as a name-keyed arena.

    Backed by a ``networkx.DiGraph``: nodes are component names, edges point
    from a component to each component it uses. Node, successor and
    predecessor dicts keep insertion order, which gives deterministic
    child and parent lists.
    """

    def __init__(self) -> None:
        self._g = nx.DiGraph()
        # Relation keys, in relation order
        self.declared: list[str] = []

    @classmethod
    def from_relation(cls, relation: Mapping[str, Sequence[str]]) -> ComponentGraph:
        """Build a graph from an adjacency relation.

        Names that only ever appear as dependencies become leaf nodes.
        Duplicate dependencies collapse into a single edge. Cycles are kept.
        """
        graph = cls()
        for name, used in relation.items():
            graph.add_node(name)
            graph.declared.append(name)
            for child in used:
                graph.add_child(name, child)
        return graph

    def add_node(self, name: str) -> ComponentNode:
        """Get or create the node called *name*."""
        if name not in self._g:
            self._g.add_node(name, cell=None, position=None)
        return ComponentNode(self, name)

    def add_child(self, parent: str, child: str) -> None:
        """Link *parent* -> *child*; a repeated link is a no-op."""
        self.add_node(parent)
        self.add_node(child)
        if not self._g.has_edge(parent, child):
            self._g.add_edge(parent, child)

    def node(self, name: str) -> ComponentNode:
        if name not in self._g:
            raise KeyError(name)
        return ComponentNode(self, name)

    def data(self, name: str) -> dict:
        return self._g.nodes[name]

    def children(self, name: str) -> list[str]:
        return list(self._g.successors(name))

    def parents(self, name: str) -> list[str]:
        return list(self._g.predecessors(name))

    def in_degree(self, name: str) -> int:
        return self._g.in_degree(name)

    @property
    def names(self) -> list[str]:
        """All node names, in creation order."""
        return list(self._g.nodes)

    @property
    def edges(self) -> list[tuple[str, str]]:
        return list(self._g.edges)

    def reset_placement(self) -> None:
        """Forget any grid cells and positions from a previous run."""
        for name in self._g.nodes:
            self._g.nodes[name]["cell"] = None
            self._g.nodes[name]["position"] = None

    def __contains__(self, name: object) -> bool:
        return name in self._g

    def __iter__(self) -> Iterator[ComponentNode]:
        for name in self._g.nodes:
            yield ComponentNode(self, name)

    def __len__(self) -> int:
        return self._g.number_of_nodes()
