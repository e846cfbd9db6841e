"""Page and card measurements for the layout calculator."""

from __future__ import annotations

__all__ = ["ConfigError", "LayoutConfig"]

import dataclasses
from dataclasses import dataclass
from functools import cached_property

from blazor_graph.layout.constants import (
    ANCHOR_TOP_LEFT,
    ANCHORS,
    CARDS_PER_ROW,
    HEADER_HEIGHT,
    HORIZONTAL_MARGIN,
    HORIZONTAL_PAGE_MARGIN,
    MAX_CARD_HEIGHT,
    MAX_CARD_WIDTH,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    ROWS_PER_PAGE,
    VERTICAL_MARGIN,
    VERTICAL_PAGE_MARGIN,
)


class ConfigError(ValueError):
    """Raised when configuration values are missing or inconsistent."""


_MEASUREMENTS = (
    "header_height",
    "page_width",
    "page_height",
    "horizontal_margin",
    "vertical_margin",
    "horizontal_page_margin",
    "vertical_page_margin",
    "max_card_width",
    "max_card_height",
)

_DERIVED = (
    "card_width",
    "card_height",
    "horizontal_page_offset",
    "vertical_page_offset",
    "available_drawing_width",
    "available_drawing_height",
    "effective_page_width",
    "effective_page_height",
    "init_y",
)


@dataclass(frozen=True)
class LayoutConfig:
    """Base measurements plus cached derived values.

    Base fields are frozen; use :meth:`evolve` to get a config with
    different values. Derived values are computed on first access and
    cached on the instance.
    """

    header_height: float = HEADER_HEIGHT
    cards_per_row: int = CARDS_PER_ROW
    rows_per_page: int = ROWS_PER_PAGE
    page_width: float = PAGE_WIDTH
    page_height: float = PAGE_HEIGHT
    horizontal_margin: float = HORIZONTAL_MARGIN
    vertical_margin: float = VERTICAL_MARGIN
    horizontal_page_margin: float = HORIZONTAL_PAGE_MARGIN
    vertical_page_margin: float = VERTICAL_PAGE_MARGIN
    max_card_width: float = MAX_CARD_WIDTH
    max_card_height: float = MAX_CARD_HEIGHT
    anchor: str = ANCHOR_TOP_LEFT

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        for name in ("cards_per_row", "rows_per_page"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigError(f"{name} must be greater than 0, got {value}")

        for name in _MEASUREMENTS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")

        for name in ("page_width", "page_height", "max_card_width", "max_card_height"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be greater than 0, got {getattr(self, name)}")

        for name in (
            "header_height",
            "horizontal_margin",
            "vertical_margin",
            "horizontal_page_margin",
            "vertical_page_margin",
        ):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)}")

        if self.anchor not in ANCHORS:
            raise ConfigError(
                f"anchor must be one of {', '.join(ANCHORS)}, got {self.anchor!r}"
            )

        if self.card_width <= 0:
            raise ConfigError(
                f"{self.cards_per_row} cards per row do not fit on a page "
                f"{self.page_width} wide with the configured margins"
            )
        if self.card_height <= 0:
            raise ConfigError(
                f"{self.rows_per_page} rows per page do not fit on a page "
                f"{self.page_height} high with the configured margins"
            )
        if self.header_height >= self.card_height:
            raise ConfigError(
                f"header_height ({self.header_height}) must be smaller than "
                f"the card height ({self.card_height:g})"
            )

    def evolve(self, **changes) -> LayoutConfig:
        """Return a validated copy with *changes* applied and a fresh cache."""
        try:
            return dataclasses.replace(self, **changes)
        except TypeError as exc:
            raise ConfigError(str(exc)) from None

    def invalidate_calculations(self) -> None:
        """Drop every cached derived value."""
        for name in _DERIVED:
            self.__dict__.pop(name, None)

    def precompute(self) -> LayoutConfig:
        """Compute every derived value now, so later access is read-only."""
        for name in _DERIVED:
            getattr(self, name)
        return self

    @cached_property
    def available_drawing_width(self) -> float:
        return self.page_width - 2 * self.horizontal_page_margin

    @cached_property
    def available_drawing_height(self) -> float:
        return self.page_height - 2 * self.vertical_page_margin

    @cached_property
    def card_width(self) -> float:
        gaps = (self.cards_per_row - 1) * self.horizontal_margin
        return min(
            self.max_card_width,
            (self.available_drawing_width - gaps) / self.cards_per_row,
        )

    @cached_property
    def card_height(self) -> float:
        gaps = (self.rows_per_page - 1) * self.vertical_margin
        return min(
            self.max_card_height,
            (self.available_drawing_height - gaps) / self.rows_per_page,
        )

    @cached_property
    def horizontal_page_offset(self) -> float:
        """Space left on a page after one full row of cards."""
        used = self.cards_per_row * self.card_width
        used += (self.cards_per_row - 1) * self.horizontal_margin
        return self.page_width - used

    @cached_property
    def vertical_page_offset(self) -> float:
        """Space left on a page after one full column of cards."""
        used = self.rows_per_page * self.card_height
        used += (self.rows_per_page - 1) * self.vertical_margin
        return self.page_height - used

    @cached_property
    def effective_page_width(self) -> float:
        """Horizontal distance from one page's first column to the next's."""
        return (
            self.cards_per_row * self.card_width
            + (self.cards_per_row - 1) * self.horizontal_margin
            + self.horizontal_page_offset
        )

    @cached_property
    def effective_page_height(self) -> float:
        """Vertical distance from one page's first row to the next's."""
        return (
            self.rows_per_page * self.card_height
            + (self.rows_per_page - 1) * self.vertical_margin
            + self.vertical_page_offset
        )

    @cached_property
    def init_y(self) -> float:
        """Y of the top card row on the first page."""
        return self.page_height - self.vertical_page_margin
