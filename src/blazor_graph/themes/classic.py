"""Classic theme: navy cards, lime vendor cards, orange state cards."""

from blazor_graph.render.style import Theme

CLASSIC_THEME = Theme(
    name="classic",
    background_color="#ffffff",
    page_guide_color="#b0b0b0",
    header_fill="#000080",
    vendor_header_fill="#32cd32",
    state_header_fill="#ffa500",
    header_text_color="#ffffff",
    body_fill="#ffffff",
    body_stroke="#000000",
    body_text_color="#000000",
    connector_color="#000000",
    font_family="Calibri, Arial, sans-serif",
    header_font_size=14.0,
    body_font_size=11.0,
)
