"""SVG generation for component diagrams using drawsvg.

Layout positions use a y-up page coordinate system in inches; this module
flips them into SVG's y-down pixel space and grows the canvas so every card
fits.
"""

from __future__ import annotations

__all__ = ["CanvasFrame", "card_box", "dependency_summary", "render_svg"]

from collections.abc import Sequence
from dataclasses import dataclass

import drawsvg as draw

from blazor_graph.layout.config import LayoutConfig
from blazor_graph.layout.constants import ANCHOR_CENTER
from blazor_graph.parser.model import PositionedNode
from blazor_graph.render.constants import (
    ARROW_SCALE,
    BODY_LINE_SPACING,
    EMPTY_SVG,
    PAGE_GUIDE_DASH,
    PIXELS_PER_UNIT,
    TEXT_INSET,
)
from blazor_graph.render.style import Theme
from blazor_graph.rules import NamingRules


def card_box(node: PositionedNode, config: LayoutConfig) -> tuple[float, float, float, float]:
    """Return ``(left, top, right, bottom)`` of a card in layout units."""
    left, top = node.x, node.y
    if config.anchor == ANCHOR_CENTER:
        left -= config.card_width / 2
        top += config.card_height / 2
    return left, top, left + config.card_width, top - config.card_height


@dataclass(frozen=True)
class CanvasFrame:
    """Maps layout coordinates onto the SVG canvas."""

    width: float
    height: float
    shift_x: float
    shift_y: float
    scale: float

    @classmethod
    def fit(
        cls,
        nodes: Sequence[PositionedNode],
        config: LayoutConfig,
        scale: float = PIXELS_PER_UNIT,
    ) -> CanvasFrame:
        """Smallest frame holding every card plus page margins.

        Never smaller than one configured page.
        """
        boxes = [card_box(n, config) for n in nodes]
        min_left = min(b[0] for b in boxes)
        max_top = max(b[1] for b in boxes)
        max_right = max(b[2] for b in boxes)
        min_bottom = min(b[3] for b in boxes)

        shift_x = max(0.0, config.horizontal_page_margin - min_left)
        shift_y = max(0.0, config.vertical_page_margin - min_bottom)
        width = max(config.page_width, max_right + shift_x + config.horizontal_page_margin)
        height = max(config.page_height, max_top + shift_y + config.vertical_page_margin)
        return cls(width, height, shift_x, shift_y, scale)

    def px(self, x: float, y: float) -> tuple[float, float]:
        return (x + self.shift_x) * self.scale, (self.height - y - self.shift_y) * self.scale

    @property
    def size_px(self) -> tuple[int, int]:
        return round(self.width * self.scale), round(self.height * self.scale)


def render_svg(
    nodes: Sequence[PositionedNode],
    config: LayoutConfig,
    theme: Theme,
    rules: NamingRules | None = None,
    scale: float = PIXELS_PER_UNIT,
) -> str:
    """Render positioned components as cards with connectors."""
    if not nodes:
        return EMPTY_SVG

    rules = rules or NamingRules()
    frame = CanvasFrame.fit(nodes, config, scale)
    width, height = frame.size_px

    d = draw.Drawing(width, height)
    d.append(draw.Rectangle(0, 0, width, height, fill=theme.background_color))

    _render_page_guides(d, nodes, config, frame, theme)
    _render_connectors(d, nodes, config, frame, theme, rules)
    for node in nodes:
        _render_card(d, node, config, frame, theme, rules)

    return d.as_svg()


def _render_page_guides(
    d: draw.Drawing,
    nodes: Sequence[PositionedNode],
    config: LayoutConfig,
    frame: CanvasFrame,
    theme: Theme,
) -> None:
    """Dashed lines where one page ends and the next begins."""
    width, height = frame.size_px
    h_pages: dict[int, float] = {}
    v_pages: dict[int, float] = {}
    for node in nodes:
        left, top, _, _ = card_box(node, config)
        hp = node.column // config.cards_per_row
        vp = node.row // config.rows_per_page
        h_pages[hp] = min(h_pages.get(hp, left), left)
        v_pages[vp] = max(v_pages.get(vp, top), top)

    for page, left in sorted(h_pages.items()):
        if page == 0:
            continue
        gx, _ = frame.px(left - config.horizontal_page_margin, 0)
        d.append(draw.Line(
            gx, 0, gx, height,
            stroke=theme.page_guide_color,
            stroke_dasharray=PAGE_GUIDE_DASH,
        ))

    for page, top in sorted(v_pages.items()):
        if page == 0:
            continue
        _, gy = frame.px(0, top + config.vertical_page_margin)
        d.append(draw.Line(
            0, gy, width, gy,
            stroke=theme.page_guide_color,
            stroke_dasharray=PAGE_GUIDE_DASH,
        ))


def _render_connectors(
    d: draw.Drawing,
    nodes: Sequence[PositionedNode],
    config: LayoutConfig,
    frame: CanvasFrame,
    theme: Theme,
    rules: NamingRules,
) -> None:
    """Draw parent -> child arrows; links touching state components are skipped."""
    arrow = draw.Marker(-0.1, -0.51, 0.9, 0.5, scale=ARROW_SCALE, orient="auto")
    arrow.append(draw.Lines(
        -0.1, 0.5, -0.1, -0.5, 0.9, 0,
        fill=theme.connector_color, close=True,
    ))

    boxes = {n.name: card_box(n, config) for n in nodes}
    for node in nodes:
        if rules.is_state(node.name):
            continue
        left, _, right, bottom = boxes[node.name]
        sx, sy = frame.px((left + right) / 2, bottom)
        for child in node.child_names:
            if child not in boxes or rules.is_state(child):
                continue
            c_left, c_top, c_right, _ = boxes[child]
            ex, ey = frame.px((c_left + c_right) / 2, c_top)
            d.append(draw.Line(
                sx, sy, ex, ey,
                stroke=theme.connector_color,
                stroke_width=theme.connector_width,
                marker_end=arrow,
            ))


def _header_fill(name: str, theme: Theme, rules: NamingRules) -> str:
    if rules.is_vendor(name):
        return theme.vendor_header_fill
    if rules.is_state(name):
        return theme.state_header_fill
    return theme.header_fill


def dependency_summary(node: PositionedNode, rules: NamingRules) -> list[str]:
    """Body text lines for a card."""
    state_deps = sum(1 for n in node.child_names if rules.is_state(n))
    state_deps += sum(1 for n in node.parent_names if rules.is_state(n))
    return [
        f"State Dep: {state_deps}",
        f"Outgoing: {len(node.child_names)}",
        f"Incoming: {len(node.parent_names)}",
    ]


def _render_card(
    d: draw.Drawing,
    node: PositionedNode,
    config: LayoutConfig,
    frame: CanvasFrame,
    theme: Theme,
    rules: NamingRules,
) -> None:
    left, top, _, _ = card_box(node, config)
    x, y = frame.px(left, top)
    w = config.card_width * frame.scale
    h = config.card_height * frame.scale
    header_h = config.header_height * frame.scale
    r = theme.card_corner_radius

    group = draw.Group(id=f"card-{node.name}")
    group.append(draw.Rectangle(
        x, y, w, h,
        rx=r, ry=r,
        fill=theme.body_fill,
        stroke=theme.body_stroke,
        stroke_width=theme.card_stroke_width,
    ))
    group.append(draw.Rectangle(
        x, y, w, header_h,
        rx=r, ry=r,
        fill=_header_fill(node.name, theme, rules),
        stroke=theme.body_stroke,
        stroke_width=theme.card_stroke_width,
    ))
    group.append(draw.Text(
        node.name,
        theme.header_font_size,
        x + w / 2, y + header_h / 2,
        fill=theme.header_text_color,
        font_family=theme.font_family,
        font_weight="bold",
        text_anchor="middle",
        dominant_baseline="central",
    ))

    line_h = theme.body_font_size * BODY_LINE_SPACING
    for i, text in enumerate(dependency_summary(node, rules)):
        group.append(draw.Text(
            text,
            theme.body_font_size,
            x + TEXT_INSET, y + header_h + line_h * (i + 1),
            fill=theme.body_text_color,
            font_family=theme.font_family,
        ))

    d.append(group)
