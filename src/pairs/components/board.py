from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class Board:
    """Ordered card entities plus aggregate score counters.

    generation is bumped on every full reset so evaluations scheduled against
    an older board can be recognised and dropped.
    """
    columns: int
    cards: List[int] = field(default_factory=list)
    match_count: int = 0
    mismatch_count: int = 0
    generation: int = 0

    @property
    def card_count(self) -> int:
        return len(self.cards)

    @property
    def total_pairs(self) -> int:
        return len(self.cards) // 2

    @property
    def total_attempts(self) -> int:
        return self.match_count + self.mismatch_count

    @property
    def is_complete(self) -> bool:
        return bool(self.cards) and self.match_count == self.total_pairs
