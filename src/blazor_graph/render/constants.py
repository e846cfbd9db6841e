"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
PIXELS_PER_UNIT: float = 96.0
"""SVG pixels per layout unit (layout units are inches)."""

EMPTY_SVG: str = '<svg xmlns="http://www.w3.org/2000/svg"></svg>'
"""Output for a diagram without components."""

# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------
TEXT_INSET: float = 8.0
"""Horizontal inset of body text from the card's left edge (pixels)."""

BODY_LINE_SPACING: float = 1.4
"""Body text line height as a multiple of the body font size."""

# ---------------------------------------------------------------------------
# Connectors and page guides
# ---------------------------------------------------------------------------
ARROW_SCALE: float = 4.0
"""Arrowhead marker scale."""

PAGE_GUIDE_DASH: str = "6,4"
"""Dash pattern for page boundary guides."""
