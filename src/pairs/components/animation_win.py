from dataclasses import dataclass

@dataclass(slots=True)
class WinPulse:
    elapsed: float = 0.0
    scale: float = 1.0
    phase: str = 'grow'  # 'grow', 'settle', 'done'
