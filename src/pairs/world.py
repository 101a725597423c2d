import random
from typing import Dict, Tuple

from esper import World
from .events.bus import EventBus
from pairs.components.board import Board
from pairs.components.selection_state import SelectionState
from pairs.components.symbol_registry import SymbolRegistry
from pairs.components.symbol_set import SymbolSet
from pairs.constants import DEFAULT_SYMBOLS, GRID_COLUMNS
from pairs.errors import LayoutConfigError


def create_world(
    event_bus: EventBus,
    *,
    symbols: Dict[str, Tuple[int, int, int]] | None = None,
    columns: int = GRID_COLUMNS,
    rng: random.Random | None = None,
) -> World:
    """Build the world with the symbol registry, board and selection singletons.

    No cards are spawned here; BoardSystem.new_board or restore_board does that.
    """
    if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
        raise LayoutConfigError(f"Board needs a positive column count, got {columns!r}")
    world = World()
    setattr(world, "random", rng or random.Random())

    # Single registry entity with the canonical symbol set.
    world.create_entity(
        SymbolRegistry(),
        SymbolSet(symbols=dict(symbols if symbols is not None else DEFAULT_SYMBOLS)),
    )
    world.create_entity(Board(columns=columns))
    world.create_entity(SelectionState())
    return world
