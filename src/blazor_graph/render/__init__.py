"""Mermaid and SVG output."""

from blazor_graph.render.mermaid import render_mermaid
from blazor_graph.render.svg import render_svg

__all__ = ["render_mermaid", "render_svg"]
