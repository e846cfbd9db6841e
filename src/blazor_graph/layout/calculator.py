"""Grid cell to page coordinate mapping.

Columns wrap onto a new horizontal page every ``cards_per_row`` cards and
rows onto a new vertical page every ``rows_per_page`` rows. Y decreases as
the row index grows, so row 0 is at the top of the first page.
"""

from __future__ import annotations

__all__ = ["LayoutCalculator", "PagePlacement"]

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from blazor_graph.layout.config import LayoutConfig
from blazor_graph.layout.constants import ANCHOR_CENTER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PagePlacement:
    """Where a grid cell lands after pagination."""

    horizontal_page: int
    layout_column: int
    vertical_page: int
    local_row: int


class LayoutCalculator:
    """Maps grid cells to continuous, paginated coordinates."""

    def __init__(self, config: LayoutConfig) -> None:
        self.config = config

    def paginate(self, row: int, column: int) -> PagePlacement:
        cfg = self.config
        return PagePlacement(
            horizontal_page=column // cfg.cards_per_row,
            layout_column=column % cfg.cards_per_row,
            vertical_page=row // cfg.rows_per_page,
            local_row=row % cfg.rows_per_page,
        )

    def x_for(self, column: int) -> float:
        cfg = self.config
        page = self.paginate(0, column)
        x = cfg.horizontal_page_margin
        x += page.layout_column * (cfg.card_width + cfg.horizontal_margin)
        x += page.horizontal_page * cfg.effective_page_width
        if cfg.anchor == ANCHOR_CENTER:
            x += cfg.card_width / 2
        return x

    def y_for(self, row: int) -> float:
        cfg = self.config
        page = self.paginate(row, 0)
        y = cfg.init_y
        y -= page.local_row * (cfg.card_height + cfg.vertical_margin)
        y -= page.vertical_page * cfg.effective_page_height
        if cfg.anchor == ANCHOR_CENTER:
            y -= cfg.card_height / 2
        return y

    def position(self, row: int, column: int) -> tuple[float, float]:
        """Raw position of one grid cell, before normalization."""
        x, y = self.x_for(column), self.y_for(row)
        logger.debug(
            "Cell (%d, %d) -> page %s -> (%.3f, %.3f)",
            row, column, self.paginate(row, column), x, y,
        )
        return x, y

    def positions(
        self, cells: Mapping[str, tuple[int, int]]
    ) -> dict[str, tuple[float, float]]:
        """Map every placed component to its normalized position."""
        raw = {name: self.position(row, col) for name, (row, col) in cells.items()}
        return self.normalize(raw)

    def normalize(
        self, positions: Mapping[str, tuple[float, float]]
    ) -> dict[str, tuple[float, float]]:
        """Translate *positions* so the minimum X and Y equal the page margins.

        The whole set moves by the same amount, so relative layout is kept.
        """
        if not positions:
            return {}

        cfg = self.config
        min_x = min(x for x, _ in positions.values())
        min_y = min(y for _, y in positions.values())
        logger.debug("Normalizing from minimum (%.3f, %.3f)", min_x, min_y)

        return {
            name: (x - min_x + cfg.horizontal_page_margin, y - min_y + cfg.vertical_page_margin)
            for name, (x, y) in positions.items()
        }

    def canvas_size(
        self, positions: Mapping[str, tuple[float, float]]
    ) -> tuple[float, float]:
        """Page size needed to hold *positions* without clipping.

        Never smaller than the configured page.
        """
        cfg = self.config
        if not positions:
            return cfg.page_width, cfg.page_height
        max_x = max(x for x, _ in positions.values())
        max_y = max(y for _, y in positions.values())
        return (
            max(cfg.page_width, max_x + cfg.horizontal_page_margin),
            max(cfg.page_height, max_y + cfg.vertical_page_margin),
        )
