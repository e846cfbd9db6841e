"""Light theme."""

from blazor_graph.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    page_guide_color="rgba(0, 0, 0, 0.15)",
    header_fill="#4a6fa5",
    vendor_header_fill="#7bc47f",
    state_header_fill="#f2b134",
    header_text_color="#ffffff",
    body_fill="#fafafa",
    body_stroke="#999999",
    body_text_color="#333333",
    connector_color="#666666",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    header_font_size=14.0,
    body_font_size=11.0,
    connector_width=1.2,
    card_corner_radius=4.0,
)
