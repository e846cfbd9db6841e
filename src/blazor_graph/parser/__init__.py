"""Component graph model and Razor extraction."""

from blazor_graph.parser.model import (
    AdjacencyRelation,
    ComponentGraph,
    ComponentNode,
    PositionedNode,
)
from blazor_graph.parser.razor import (
    ExtractionError,
    build_relation,
    extract_components,
    read_relation,
    write_relation,
)

__all__ = [
    "AdjacencyRelation",
    "ComponentGraph",
    "ComponentNode",
    "ExtractionError",
    "PositionedNode",
    "build_relation",
    "extract_components",
    "read_relation",
    "write_relation",
]
