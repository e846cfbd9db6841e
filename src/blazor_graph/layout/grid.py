"""Discrete row/column placement of components.

Row 0 is reserved for state components. Root components start on row 1
and every other component sits one row below its first placed parent.
Columns are simply the next free slot in the row, so placement depends
on the order in which components are visited.
"""

from __future__ import annotations

__all__ = ["Grid", "GridAssigner", "assign_grid"]

import logging
from collections.abc import Callable, Iterable

from blazor_graph.layout.constants import ROOT_ROW, STATE_ROW
from blazor_graph.parser.model import ComponentGraph

logger = logging.getLogger(__name__)


class Grid:
    """Sparse grid of component names.

    Rows are created on demand and only ever appended to. A name occupies
    at most one cell.
    """

    def __init__(self) -> None:
        self.rows: list[list[str]] = []
        self._cells: dict[str, tuple[int, int]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def cell_of(self, name: str) -> tuple[int, int] | None:
        """Return ``(row, column)`` of *name*, or None if unplaced."""
        return self._cells.get(name)

    def row_of(self, name: str) -> int | None:
        cell = self._cells.get(name)
        return cell[0] if cell else None

    def place(self, name: str, row: int) -> tuple[int, int]:
        """Append *name* to *row*, creating rows up to it as needed.

        Placing an already placed name returns its existing cell.
        """
        existing = self._cells.get(name)
        if existing is not None:
            return existing
        while len(self.rows) <= row:
            self.rows.append([])
        self.rows[row].append(name)
        cell = (row, len(self.rows[row]) - 1)
        self._cells[name] = cell
        return cell

    def cells(self) -> dict[str, tuple[int, int]]:
        """Return a copy of the name -> cell mapping, in placement order."""
        return dict(self._cells)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def format_table(self) -> str:
        """Render the grid as a bordered text table, one line per row."""
        if not self.rows:
            return ""

        col_count = self.width
        widths = [0] * col_count
        for row in self.rows:
            for col, name in enumerate(row):
                widths[col] = max(widths[col], len(f"[{col}] {name}"))

        label_width = len(f"row: [{len(self.rows) - 1}]")
        border = " " * label_width + "+" + "+".join("-" * (w + 2) for w in widths) + "+"

        out = [border]
        for row_idx, row in enumerate(self.rows):
            label = f"row: [{row_idx}]".ljust(label_width)
            cells = []
            for col in range(col_count):
                text = f"[{col}] {row[col]}" if col < len(row) else ""
                cells.append(" " + text.center(widths[col]) + " ")
            out.append(label + "|" + "|".join(cells) + "|")
        out.append(border)
        return "\n".join(out)


class GridAssigner:
    """Places components into a :class:`Grid` one at a time.

    Args:
        graph: The component graph supplying parent lists.
        is_state: Predicate selecting state components (pinned to row 0).
        grid: Grid to fill; a new one is created when omitted.
    """

    def __init__(
        self,
        graph: ComponentGraph,
        is_state: Callable[[str], bool],
        grid: Grid | None = None,
    ) -> None:
        self.graph = graph
        self.is_state = is_state
        self.grid = grid if grid is not None else Grid()

    def place_node(self, name: str) -> tuple[int, int] | None:
        """Place one component and return its cell.

        Returns None when the component has parents but none of them is
        placed yet; it is left out of the grid.
        """
        grid = self.grid
        if name in grid:
            return grid.cell_of(name)

        if self.is_state(name):
            cell = grid.place(name, STATE_ROW)
            logger.debug("Placed state component %s at %s", name, cell)
            return self._record(name, cell)

        parents = self.graph.parents(name) if name in self.graph else []
        if not parents:
            cell = grid.place(name, ROOT_ROW)
            logger.debug("Placed root %s at %s", name, cell)
            return self._record(name, cell)

        for parent in parents:
            parent_row = grid.row_of(parent)
            if parent_row is not None:
                cell = grid.place(name, parent_row + 1)
                logger.debug("Placed %s under %s at %s", name, parent, cell)
                return self._record(name, cell)

        logger.debug("Skipped %s: no parent placed yet (parents: %s)", name, parents)
        return None

    def assign(self, order: Iterable[str]) -> Grid:
        """Place every component of *order*, in order."""
        for name in order:
            self.place_node(name)
        return self.grid

    def _record(self, name: str, cell: tuple[int, int]) -> tuple[int, int]:
        if name in self.graph:
            self.graph.node(name).cell = cell
        return cell


def assign_grid(
    graph: ComponentGraph,
    order: Iterable[str],
    is_state: Callable[[str], bool],
) -> Grid:
    """Build a fresh grid for *graph* from a visitation order."""
    return GridAssigner(graph, is_state).assign(order)
