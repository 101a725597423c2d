"""Exceptions raised by the pairs core."""


class PairsError(Exception):
    """Base class for every error raised by the game core."""


class CorruptSaveError(PairsError):
    """A persisted snapshot exists but cannot be parsed into the expected shape."""


class UnknownSymbolError(PairsError):
    """A persisted card references a symbol key missing from the symbol registry."""

    def __init__(self, symbol_id: str):
        super().__init__(f"Unknown symbol {symbol_id!r}")
        self.symbol_id = symbol_id


class LayoutConfigError(PairsError):
    """Setup-time layout configuration is unusable (e.g. non-positive column count)."""
