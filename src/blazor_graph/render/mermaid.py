"""Mermaid flow-chart output for component graphs.

Only edges and the vendor classification are used; positions are ignored.
"""

from __future__ import annotations

__all__ = ["render_mermaid", "sanitize_name"]

from collections.abc import Mapping, Sequence

from blazor_graph.config import DEFAULT_VENDOR_COLOR
from blazor_graph.rules import NamingRules

RESERVED_NAMES = frozenset({
    "style", "strong", "end", "graph", "subgraph", "class", "classDef", "click",
})


def sanitize_name(name: str) -> str:
    """Prefix names that clash with Mermaid keywords or HTML tags."""
    if name in RESERVED_NAMES:
        return f"tag_{name}"
    return name


def render_mermaid(
    relation: Mapping[str, Sequence[str]],
    rules: NamingRules | None = None,
    vendor_color: str = DEFAULT_VENDOR_COLOR,
) -> str:
    """Render *relation* as a top-down Mermaid graph.

    Each component seen for the first time as a relation key gets its own
    subgraph holding its outgoing links.
    """
    rules = rules or NamingRules()
    out = ["graph TD"]
    seen: set[str] = set()

    for component, used in relation.items():
        parent = sanitize_name(component)
        opens_subgraph = parent not in seen
        if opens_subgraph:
            out.append(f"subgraph {parent}_g")
            out.append(parent)
            seen.add(parent)

        for dep in used:
            child = sanitize_name(dep)
            out.append(f"{parent}--> {child}")
            seen.add(child)
            if rules.is_vendor(dep):
                out.append(f"style {child} fill:{vendor_color}")

        if opens_subgraph:
            out.append("end")

    return "\n".join(out) + "\n"
