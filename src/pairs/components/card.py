from dataclasses import dataclass

@dataclass(slots=True)
class Card:
    """Per-card face assignment and match status.

    symbol_id is the stable registry key of the face (never a texture handle).
    is_face_up is transient; matched cards always stay face-up.
    """
    symbol_id: str
    is_matched: bool = False
    is_face_up: bool = False


@dataclass(slots=True)
class CardSlot:
    """Layout position of a card within the board (0-based, row-major)."""
    index: int
