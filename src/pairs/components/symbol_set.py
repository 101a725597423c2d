from dataclasses import dataclass
from typing import Dict, List, Tuple

Color = Tuple[int, int, int]

@dataclass(slots=True)
class SymbolSet:
    """Fixed mapping from stable symbol key to symbol data, built once at startup.

    Insertion order is preserved and defines deck construction order.
    """
    symbols: Dict[str, Color]

    def __post_init__(self) -> None:
        if not self.symbols:
            raise ValueError("SymbolSet requires at least one symbol")

    def keys(self) -> List[str]:
        return list(self.symbols.keys())

    def has(self, symbol_id: str) -> bool:
        return symbol_id in self.symbols

    def color_for(self, symbol_id: str) -> Color:
        return self.symbols[symbol_id]
