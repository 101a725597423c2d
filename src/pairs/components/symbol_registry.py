from dataclasses import dataclass

@dataclass(slots=True)
class SymbolRegistry:
    """Empty tag component marking the single entity that stores the symbol set.

    The same entity also carries a SymbolSet component with key -> colour data.
    """
    pass
