"""Host-facing lifecycle: wires the core systems and exposes initialize/shutdown."""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Dict, Tuple

from esper import World

from pairs.constants import EVALUATION_DELAY, GRID_COLUMNS
from pairs.errors import CorruptSaveError, UnknownSymbolError
from pairs.events.bus import EventBus
from pairs.systems.board import BoardSystem
from pairs.systems.board_ops import get_board
from pairs.systems.match import MatchSystem
from pairs.systems.persistence_system import PersistenceSystem
from pairs.world import create_world

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the world and the core systems for one running game."""

    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        world: World | None = None,
        symbols: Dict[str, Tuple[int, int, int]] | None = None,
        columns: int = GRID_COLUMNS,
        rng: random.Random | None = None,
        save_path: Path | None = None,
        evaluation_delay: float = EVALUATION_DELAY,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        if world is None:
            world = create_world(self.event_bus, symbols=symbols, columns=columns, rng=rng)
        self.world = world
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.persistence_system = PersistenceSystem(self.world, self.event_bus, save_path=save_path)
        self.match_system = MatchSystem(
            self.world,
            self.event_bus,
            self.board_system,
            evaluation_delay=evaluation_delay,
        )

    def initialize(self) -> bool:
        """Restore the saved game or start a new one; True when a save was restored."""
        restored = False
        try:
            snapshot = self.persistence_system.load()
            if snapshot is not None:
                self.board_system.restore_board(snapshot)
                restored = True
        except (CorruptSaveError, UnknownSymbolError) as exc:
            logger.warning("Saved game unusable (%s); starting a new game", exc)
            self.persistence_system.reset()
        if not restored:
            self.board_system.new_board()
        self.match_system.emit_score()
        return restored

    def shutdown(self) -> None:
        """Final save on process/session termination; nothing is written before a board exists."""
        if not get_board(self.world).cards:
            logger.info("No board to save on shutdown")
            return
        self.persistence_system.save()
