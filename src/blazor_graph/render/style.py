"""Theme definition for component card rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a component diagram."""

    name: str
    background_color: str
    page_guide_color: str
    header_fill: str
    vendor_header_fill: str
    state_header_fill: str
    header_text_color: str
    body_fill: str
    body_stroke: str
    body_text_color: str
    connector_color: str
    font_family: str
    header_font_size: float
    body_font_size: float
    connector_width: float = 1.5
    card_stroke_width: float = 1.0
    card_corner_radius: float = 0.0
