"""Layout constants used across layout modules.

Default page measurements are in inches (US Letter, landscape).
"""

# ---------------------------------------------------------------------------
# Grid rows
# ---------------------------------------------------------------------------
STATE_ROW: int = 0
"""Row reserved for state components."""

ROOT_ROW: int = 1
"""Row for components without parents."""

# ---------------------------------------------------------------------------
# Page defaults
# ---------------------------------------------------------------------------
PAGE_WIDTH: float = 11.0
"""Page width."""

PAGE_HEIGHT: float = 8.5
"""Page height."""

HORIZONTAL_PAGE_MARGIN: float = 0.5
"""Gap between the left page edge and the first card column."""

VERTICAL_PAGE_MARGIN: float = 0.5
"""Gap between the top page edge and the first card row."""

# ---------------------------------------------------------------------------
# Card defaults
# ---------------------------------------------------------------------------
CARDS_PER_ROW: int = 2
"""Card columns that fit on one page."""

ROWS_PER_PAGE: int = 2
"""Card rows that fit on one page."""

HEADER_HEIGHT: float = 0.5
"""Height of the title band at the top of each card."""

HORIZONTAL_MARGIN: float = 0.2
"""Horizontal gap between neighbouring cards."""

VERTICAL_MARGIN: float = 0.2
"""Vertical gap between neighbouring cards."""

MAX_CARD_WIDTH: float = 2.0
"""Upper bound for the computed card width."""

MAX_CARD_HEIGHT: float = 1.5
"""Upper bound for the computed card height."""

# ---------------------------------------------------------------------------
# Pin conventions
# ---------------------------------------------------------------------------
ANCHOR_TOP_LEFT: str = "top-left"
"""Positions name the top-left corner of a card."""

ANCHOR_CENTER: str = "center"
"""Positions name the centre of a card."""

ANCHORS: tuple[str, ...] = (ANCHOR_TOP_LEFT, ANCHOR_CENTER)
