from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from pairs.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    CARD_GAP,
    RESTART_BUTTON_HEIGHT,
    RESTART_BUTTON_MARGIN,
    RESTART_BUTTON_WIDTH,
    TOP_MARGIN,
)
from pairs.errors import LayoutConfigError


@dataclass(slots=True)
class BoardGeometry:
    """Fixed-column grid placement; row 0 is the top row, filled left to right."""

    columns: int
    rows: int
    card_size: int
    gap: int
    left: float
    top: float

    @property
    def width(self) -> float:
        return self.columns * self.card_size + (self.columns - 1) * self.gap

    @property
    def height(self) -> float:
        return self.rows * self.card_size + max(0, self.rows - 1) * self.gap

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        return self.top - self.height / 2

    def card_center(self, index: int) -> Tuple[float, float]:
        row, col = divmod(index, self.columns)
        step = self.card_size + self.gap
        cx = self.left + col * step + self.card_size / 2
        cy = self.top - row * step - self.card_size / 2
        return cx, cy

    def index_at(self, x: float, y: float, card_count: int) -> int | None:
        if x < self.left or x > self.left + self.width:
            return None
        if y > self.top or y < self.top - self.height:
            return None
        step = self.card_size + self.gap
        col = int((x - self.left) // step)
        row = int((self.top - y) // step)
        # Clicks in the gutter between cards hit nothing.
        if (x - self.left) - col * step > self.card_size:
            return None
        if (self.top - y) - row * step > self.card_size:
            return None
        if not (0 <= col < self.columns and 0 <= row < self.rows):
            return None
        index = row * self.columns + col
        return index if index < card_count else None


def compute_board_geometry(window_width: int, window_height: int, columns: int, card_count: int) -> BoardGeometry:
    """Size cards so the grid fits the configured share of the window, centred horizontally."""
    if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
        raise LayoutConfigError(f"Grid layout needs a positive column count, got {columns!r}")
    rows = max(1, math.ceil(card_count / columns))
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - TOP_MARGIN - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    card_by_w = (max_board_w - (columns - 1) * CARD_GAP) / columns
    card_by_h = (max_board_h - (rows - 1) * CARD_GAP) / rows
    card_size = int(min(card_by_w, card_by_h))
    if card_size < 20:
        card_size = 20  # safety minimum
    width = columns * card_size + (columns - 1) * CARD_GAP
    left = (window_width - width) / 2
    top = window_height - TOP_MARGIN
    return BoardGeometry(columns=columns, rows=rows, card_size=card_size, gap=CARD_GAP, left=left, top=top)


def restart_button_rect(window_width: int, window_height: int) -> Tuple[float, float, float, float]:
    """Return (left, bottom, width, height) of the restart button."""
    left = window_width - RESTART_BUTTON_MARGIN - RESTART_BUTTON_WIDTH
    bottom = window_height - RESTART_BUTTON_MARGIN - RESTART_BUTTON_HEIGHT
    return left, bottom, RESTART_BUTTON_WIDTH, RESTART_BUTTON_HEIGHT


def point_in_rect(x: float, y: float, rect: Tuple[float, float, float, float]) -> bool:
    left, bottom, width, height = rect
    return left <= x <= left + width and bottom <= y <= bottom + height
