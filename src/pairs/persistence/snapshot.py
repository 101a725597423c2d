from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from esper import World

from pairs.systems.board_ops import get_board, iter_cards


@dataclass(frozen=True, slots=True)
class CardState:
    """Persisted state of one card: stable symbol key and match flag."""

    symbol_id: str
    is_matched: bool


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Durable form of the board. Selection state is never part of it."""

    match_count: int
    mismatch_count: int
    cards: List[CardState] = field(default_factory=list)

    @property
    def total_pairs(self) -> int:
        return len(self.cards) // 2


def snapshot_board(world: World) -> BoardSnapshot:
    board = get_board(world)
    return BoardSnapshot(
        match_count=board.match_count,
        mismatch_count=board.mismatch_count,
        cards=[CardState(symbol_id=card.symbol_id, is_matched=card.is_matched) for _, _, card in iter_cards(world)],
    )
