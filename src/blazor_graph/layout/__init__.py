"""Grid assignment and paginated coordinate layout."""

from blazor_graph.layout.calculator import LayoutCalculator
from blazor_graph.layout.config import ConfigError, LayoutConfig
from blazor_graph.layout.engine import DiagramPositioner, LayoutResult, compute_layout
from blazor_graph.layout.grid import Grid, GridAssigner, assign_grid
from blazor_graph.layout.traversal import bfs_order, find_roots

__all__ = [
    "ConfigError",
    "DiagramPositioner",
    "Grid",
    "GridAssigner",
    "LayoutCalculator",
    "LayoutConfig",
    "LayoutResult",
    "assign_grid",
    "bfs_order",
    "compute_layout",
    "find_roots",
]
