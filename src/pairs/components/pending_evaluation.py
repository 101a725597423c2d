from dataclasses import dataclass

@dataclass(slots=True)
class PendingEvaluation:
    """Scheduled comparison of two revealed cards.

    generation captures Board.generation at scheduling time; the evaluation is
    discarded when the board has been reset since.
    """
    first: int
    second: int
    generation: int
    remaining: float
