"""Layout coordinator: graph construction, traversal, grid and coordinates.

Data flows one way: adjacency relation -> graph -> visitation order ->
grid -> raw positions -> normalized positions.
"""

from __future__ import annotations

__all__ = ["DiagramPositioner", "LayoutResult", "compute_layout"]

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from blazor_graph.layout.calculator import LayoutCalculator
from blazor_graph.layout.config import LayoutConfig
from blazor_graph.layout.grid import Grid, GridAssigner
from blazor_graph.layout.traversal import bfs_order, find_roots, unreachable
from blazor_graph.parser.model import ComponentGraph, PositionedNode
from blazor_graph.rules import NamingRules

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    """Everything one layout run produced."""

    graph: ComponentGraph
    roots: list[str]
    order: list[str]
    grid: Grid
    nodes: list[PositionedNode] = field(default_factory=list)
    unplaced: list[str] = field(default_factory=list)

    @property
    def max_x(self) -> float:
        return max((n.x for n in self.nodes), default=0.0)

    @property
    def max_y(self) -> float:
        return max((n.y for n in self.nodes), default=0.0)

    def by_name(self) -> dict[str, PositionedNode]:
        return {node.name: node for node in self.nodes}


class DiagramPositioner:
    """Turns an adjacency relation into positioned components.

    The positioner keeps no state between runs, so one instance can lay
    out independent relations from several threads.
    """

    def __init__(
        self,
        config: LayoutConfig | None = None,
        rules: NamingRules | None = None,
    ) -> None:
        self.config = (config or LayoutConfig()).precompute()
        self.rules = rules or NamingRules()
        self.calculator = LayoutCalculator(self.config)

    def run(self, relation: Mapping[str, Sequence[str]]) -> LayoutResult:
        graph = ComponentGraph.from_relation(relation)
        roots = find_roots(graph)
        order = bfs_order(graph)

        grid = GridAssigner(graph, self.rules.is_state).assign(order)
        positions = self.calculator.positions(grid.cells())

        nodes = []
        for name, (x, y) in positions.items():
            graph.node(name).position = (x, y)
            row, column = grid.cell_of(name)
            nodes.append(PositionedNode(
                name=name,
                x=x,
                y=y,
                row=row,
                column=column,
                child_names=tuple(graph.children(name)),
                parent_names=tuple(graph.parents(name)),
            ))

        unplaced = [name for name in graph.names if name not in grid]
        missed = unreachable(graph, order)
        if missed:
            logger.warning(
                "%d component(s) are only reachable through a cycle and were "
                "not laid out: %s", len(missed), ", ".join(missed),
            )

        logger.info(
            "Laid out %d of %d components on %d grid rows",
            len(nodes), len(graph), len(grid.rows),
        )
        return LayoutResult(
            graph=graph,
            roots=roots,
            order=order,
            grid=grid,
            nodes=nodes,
            unplaced=unplaced,
        )

    def position(self, relation: Mapping[str, Sequence[str]]) -> list[PositionedNode]:
        """Return positioned components for *relation*, in placement order."""
        return self.run(relation).nodes


def compute_layout(
    relation: Mapping[str, Sequence[str]],
    config: LayoutConfig | None = None,
    rules: NamingRules | None = None,
) -> LayoutResult:
    """Compute a full layout for *relation*."""
    return DiagramPositioner(config, rules).run(relation)
