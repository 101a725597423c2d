"""Selection state machine component."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class SelectionPhase(Enum):
    """Turn phases of the two-card selection state machine."""
    IDLE = auto()
    ONE_SELECTED = auto()
    EVALUATING = auto()
    WON = auto()


@dataclass
class SelectionState:
    """Singleton component holding the at-most-two currently selected cards."""
    phase: SelectionPhase = SelectionPhase.IDLE
    first: Optional[int] = None
    second: Optional[int] = None

    def clear(self, phase: SelectionPhase = SelectionPhase.IDLE) -> None:
        self.first = None
        self.second = None
        self.phase = phase

    @property
    def accepts_selection(self) -> bool:
        return self.phase in (SelectionPhase.IDLE, SelectionPhase.ONE_SELECTED)
