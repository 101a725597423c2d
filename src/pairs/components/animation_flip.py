from dataclasses import dataclass

@dataclass(slots=True)
class FlipAnimation:
    index: int
    to_face: bool  # True when turning face-up, False when turning face-down
    progress: float = 0.0  # 0..1 over FLIP_DURATION
