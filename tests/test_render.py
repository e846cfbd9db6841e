"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

import pytest

from blazor_graph.layout.config import LayoutConfig
from blazor_graph.layout.engine import compute_layout
from blazor_graph.render.svg import CanvasFrame, card_box, dependency_summary, render_svg
from blazor_graph.rules import NamingRules
from blazor_graph.themes import CLASSIC_THEME, LIGHT_THEME

APP = {"App": ["Header", "Body"], "Header": [], "Body": ["WidgetState"]}
RULES = NamingRules(vendors=["Mud"])


def _render(relation=APP, config=None, theme=CLASSIC_THEME):
    config = config or LayoutConfig()
    result = compute_layout(relation, config, RULES)
    return render_svg(result.nodes, config, theme, RULES)


def test_render_produces_valid_svg():
    root = ET.fromstring(_render())
    assert root.tag.endswith("svg")


def test_render_contains_component_names():
    svg = _render()
    for name in ("App", "Header", "Body", "WidgetState"):
        assert name in svg


def test_render_colors_by_classification():
    svg = _render({"App": ["MudButton", "CartState"]})
    assert CLASSIC_THEME.header_fill in svg
    assert CLASSIC_THEME.vendor_header_fill in svg
    assert CLASSIC_THEME.state_header_fill in svg


def test_render_dependency_counts():
    svg = _render()
    assert "Outgoing: 2" in svg
    assert "Incoming: 1" in svg
    assert "State Dep: 1" in svg


def test_render_light_theme():
    svg = _render(theme=LIGHT_THEME)
    assert LIGHT_THEME.header_fill in svg


def test_render_empty():
    svg = render_svg([], LayoutConfig(), CLASSIC_THEME)
    assert ET.fromstring(svg).tag.endswith("svg")


def test_canvas_at_least_one_page():
    config = LayoutConfig()
    result = compute_layout({"Solo": []}, config)
    frame = CanvasFrame.fit(result.nodes, config)
    assert frame.size_px == (round(11 * 96), round(8.5 * 96))


def test_canvas_grows_for_many_pages():
    config = LayoutConfig()
    relation = {"App": [f"Child{i}" for i in range(9)]}
    result = compute_layout(relation, config)
    frame = CanvasFrame.fit(result.nodes, config)
    # Column 8 is on the fifth horizontal page
    assert frame.width >= 4 * 11 + 0.5 + 2.0
    for node in result.nodes:
        left, top, right, bottom = card_box(node, config)
        x1, y1 = frame.px(left, top)
        x2, y2 = frame.px(right, bottom)
        assert 0 <= x1 < x2 <= frame.size_px[0]
        assert 0 <= y1 < y2 <= frame.size_px[1]


def test_cards_fit_with_center_anchor():
    config = LayoutConfig(anchor="center")
    result = compute_layout(APP, config)
    frame = CanvasFrame.fit(result.nodes, config)
    for node in result.nodes:
        left, top, right, bottom = card_box(node, config)
        x1, y1 = frame.px(left, top)
        x2, y2 = frame.px(right, bottom)
        assert x1 >= 0 and y1 >= 0
        assert x2 <= frame.size_px[0] and y2 <= frame.size_px[1]


def test_card_box_anchors():
    config = LayoutConfig()
    result = compute_layout({"Solo": []}, config)
    node = result.nodes[0]
    assert card_box(node, config) == pytest.approx((0.5, 0.5, 2.5, -1.0))
    centered = LayoutConfig(anchor="center")
    assert card_box(node, centered) == pytest.approx((-0.5, 1.25, 1.5, -0.25))


def test_connectors_skip_state_components():
    config = LayoutConfig()
    with_state = compute_layout({"App": ["Header", "CartState"]}, config, RULES)
    without_state = compute_layout({"App": ["Header"]}, config, RULES)
    svg_with = render_svg(with_state.nodes, config, CLASSIC_THEME, RULES)
    svg_without = render_svg(without_state.nodes, config, CLASSIC_THEME, RULES)
    assert svg_with.count("marker-end") == svg_without.count("marker-end") == 1


def test_page_guides_drawn_between_pages():
    config = LayoutConfig(rows_per_page=3)
    single = _render({"App": ["A"]}, config)
    paged = _render({"App": ["A", "B", "C"]}, config)
    assert "stroke-dasharray" not in single
    assert "stroke-dasharray" in paged


def test_dependency_summary():
    result = compute_layout(APP)
    body = result.by_name()["Body"]
    assert dependency_summary(body, NamingRules()) == [
        "State Dep: 1",
        "Outgoing: 1",
        "Incoming: 1",
    ]
